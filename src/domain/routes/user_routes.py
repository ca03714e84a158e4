import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from src.base.client.api_client import ApiError
from src.base.core.dependencies import get_backend, get_user_service
from src.base.models.role import KnownRole
from src.base.models.user import User
from src.domain.models.user_schemas import (
    UserForm,
    UserListQuery,
    UserListResponse,
    UserUpdateForm,
)
from src.domain.repositories.backend import UserHubBackend
from src.domain.routes.form_errors import form_error_response
from src.domain.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["User Management"])
logger = logging.getLogger(__name__)


def _user_json(user: User) -> dict:
    return user.model_dump(mode="json", by_alias=True)


async def _load_user(
    backend: UserHubBackend, service: UserService, user_id: str
) -> User:
    user = await service.get_user_by_id(backend, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.get("", response_model=UserListResponse)
async def list_users(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=10000),
    search: str | None = None,
    role: str | None = None,
    backend: UserHubBackend = Depends(get_backend),
    service: UserService = Depends(get_user_service),
):
    """Paginated user list with optional search term and role filter."""
    result = await service.get_users(backend, page, limit, search, role)
    return UserListResponse(
        users=result.items,
        total=result.total,
        current_page=result.current_page,
        total_pages=result.total_pages,
        query=UserListQuery(page=page, limit=limit, search=search, role=role),
    )


@router.get("/create")
async def create_user_page(
    backend: UserHubBackend = Depends(get_backend),
    service: UserService = Depends(get_user_service),
):
    existing_roles = await service.get_unique_roles(backend)
    return {
        "title": "Create User",
        "roles": sorted(set(KnownRole.get_all_roles()) | set(existing_roles)),
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserForm,
    backend: UserHubBackend = Depends(get_backend),
    service: UserService = Depends(get_user_service),
):
    try:
        user = await service.create_user(backend, body)
    except ApiError as e:
        return form_error_response(e, body)
    return {"message": "User created successfully.", "user": _user_json(user)}


@router.get("/{user_id}")
async def user_detail(
    user_id: str,
    backend: UserHubBackend = Depends(get_backend),
    service: UserService = Depends(get_user_service),
):
    user = await _load_user(backend, service, user_id)
    return {"title": user.full_name, "user": _user_json(user)}


@router.get("/{user_id}/edit")
async def edit_user_page(
    user_id: str,
    backend: UserHubBackend = Depends(get_backend),
    service: UserService = Depends(get_user_service),
):
    user = await _load_user(backend, service, user_id)
    existing_roles = await service.get_unique_roles(backend)
    return {
        "title": f"Edit {user.full_name}",
        "user": _user_json(user),
        "roles": sorted(set(KnownRole.get_all_roles()) | set(existing_roles)),
    }


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    body: UserUpdateForm,
    backend: UserHubBackend = Depends(get_backend),
    service: UserService = Depends(get_user_service),
):
    try:
        user = await service.update_user(backend, user_id, body)
    except ApiError as e:
        return form_error_response(e, body)
    return {"message": "User updated successfully.", "user": _user_json(user)}


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    backend: UserHubBackend = Depends(get_backend),
    service: UserService = Depends(get_user_service),
):
    try:
        await service.delete_user(backend, user_id)
    except ApiError as e:
        return form_error_response(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
