from fastapi import APIRouter, Depends

from src.base.client.api_client import ApiError
from src.base.core.dependencies import get_backend, get_current_user, get_user_service
from src.base.models.user import User
from src.domain.models.user_schemas import ChangePasswordForm, ProfileForm
from src.domain.repositories.backend import UserHubBackend
from src.domain.routes.form_errors import form_error_response
from src.domain.services.user_service import UserService

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("")
async def profile_page(user: User = Depends(get_current_user)):
    return {"title": "My Profile", "user": user.model_dump(mode="json", by_alias=True)}


@router.put("")
async def update_profile(
    body: ProfileForm,
    user: User = Depends(get_current_user),
    backend: UserHubBackend = Depends(get_backend),
    service: UserService = Depends(get_user_service),
):
    try:
        updated = await service.update_user(backend, user.id, body)
    except ApiError as e:
        return form_error_response(e, body)
    return {
        "message": "Profile updated successfully.",
        "user": updated.model_dump(mode="json", by_alias=True),
    }


@router.post("/password")
async def change_password(
    body: ChangePasswordForm,
    user: User = Depends(get_current_user),
    backend: UserHubBackend = Depends(get_backend),
    service: UserService = Depends(get_user_service),
):
    try:
        result = await service.change_password(backend, body)
    except ApiError as e:
        return form_error_response(e, body)
    return result
