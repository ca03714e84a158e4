import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, RedirectResponse

from src.base.auth.token_store import TokenStore, clear_auth_cookie, set_auth_cookie
from src.base.client.api_client import ApiError
from src.base.core.dependencies import get_auth_service, get_backend, get_token_store
from src.base.middleware.route_guard_middleware import DASHBOARD_PATH, LOGIN_PATH
from src.domain.models.auth_schemas import (
    ForgotPasswordForm,
    LoginForm,
    RegisterForm,
    ResetPasswordForm,
)
from src.domain.repositories.backend import UserHubBackend
from src.domain.routes.form_errors import form_error_response
from src.domain.services.auth_service import AuthService

router = APIRouter(tags=["Auth"])
logger = logging.getLogger(__name__)


def _page(title: str, **extra) -> dict:
    return {"title": f"{title} | User Hub", **extra}


@router.get("/login")
async def login_page():
    return _page("Login", form={"email": "", "password": "", "rememberMe": False})


@router.post("/login")
async def login(
    body: LoginForm,
    backend: UserHubBackend = Depends(get_backend),
    service: AuthService = Depends(get_auth_service),
    token_store: TokenStore = Depends(get_token_store),
):
    """Authenticate against the backend; the token goes to the token store and the auth cookie."""
    try:
        result = await service.login(backend, body, token_store=token_store)
    except ApiError as e:
        return form_error_response(e, body)

    user = result.user.model_dump(mode="json", by_alias=True) if result.user else None
    response = JSONResponse(
        content={
            "message": "Login Successful!",
            "user": user,
            "redirect": DASHBOARD_PATH,
        }
    )
    set_auth_cookie(response, result.token)
    return response


@router.post("/logout")
async def logout(
    service: AuthService = Depends(get_auth_service),
    token_store: TokenStore = Depends(get_token_store),
):
    """Clear the stored token and the auth cookie; the next page load is sent to the login page."""
    await service.logout(token_store)
    response = RedirectResponse(url=LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)
    clear_auth_cookie(response)
    return response


@router.get("/register")
async def register_page():
    return _page(
        "Register", form={"firstName": "", "lastName": "", "email": "", "password": ""}
    )


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterForm,
    backend: UserHubBackend = Depends(get_backend),
    service: AuthService = Depends(get_auth_service),
):
    try:
        result = await service.register(backend, body)
    except ApiError as e:
        return form_error_response(e, body)
    return {"message": result.message, "redirect": LOGIN_PATH}


@router.get("/forgot-password")
async def forgot_password_page():
    return _page("Forgot Password", form={"email": ""})


@router.post("/forgot-password")
async def forgot_password(
    body: ForgotPasswordForm,
    backend: UserHubBackend = Depends(get_backend),
    service: AuthService = Depends(get_auth_service),
):
    try:
        result = await service.forgot_password(backend, body)
    except ApiError as e:
        return form_error_response(e, body)
    return {"message": result.message, "redirect": LOGIN_PATH}


@router.get("/reset-password")
async def reset_password_page(token: str = ""):
    return _page("Reset Password", form={"token": token})


@router.post("/reset-password")
async def reset_password(
    body: ResetPasswordForm,
    backend: UserHubBackend = Depends(get_backend),
    service: AuthService = Depends(get_auth_service),
):
    try:
        result = await service.reset_password(backend, body)
    except ApiError as e:
        return form_error_response(e, body)
    return {"message": result.message, "redirect": LOGIN_PATH}
