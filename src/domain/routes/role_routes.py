import logging

from fastapi import APIRouter, Depends

from src.base.client.api_client import ApiError
from src.base.core.dependencies import get_backend, get_role_service
from src.domain.models.role_schemas import (
    RoleListResponse,
    SuggestedRoleView,
    SuggestRolesRequest,
    SuggestRolesResponse,
)
from src.domain.repositories.backend import UserHubBackend
from src.domain.routes.form_errors import form_error_response
from src.domain.services.role_service import RoleService

router = APIRouter(prefix="/roles", tags=["Role Management"])
logger = logging.getLogger(__name__)


@router.get("", response_model=RoleListResponse)
async def list_roles(
    backend: UserHubBackend = Depends(get_backend),
    service: RoleService = Depends(get_role_service),
):
    """Known roles with descriptions and how many users hold each."""
    roles = await service.list_roles_with_counts(backend)
    return RoleListResponse(roles=roles)


@router.get("/suggest")
async def suggest_roles_page():
    return {"title": "AI Role Suggester", "form": {"jobTitle": ""}}


@router.post("/suggest", response_model=SuggestRolesResponse)
async def suggest_roles(
    body: SuggestRolesRequest,
    backend: UserHubBackend = Depends(get_backend),
    service: RoleService = Depends(get_role_service),
):
    """Suggested roles for a job title; unknown role names are flagged as not known."""
    try:
        roles = await service.suggest_roles(backend, body.job_title)
    except ApiError as e:
        return form_error_response(e)
    return SuggestRolesResponse(
        job_title=body.job_title,
        suggested_roles=[SuggestedRoleView.from_role(r) for r in roles],
    )
