import logging

from src.base.models.role import KnownRole, Role, parse_role
from src.domain.models.role_schemas import RoleSummary
from src.domain.repositories.backend import UserHubBackend
from src.domain.services.user_service import UserService

logger = logging.getLogger(__name__)

# Large enough to fetch every user in one page for role counting.
ALL_USERS_LIMIT = 10000


class RoleService:
    def __init__(self, user_service: UserService):
        self._users = user_service

    async def list_roles_with_counts(self, backend: UserHubBackend) -> list[RoleSummary]:
        """One summary per known role with the number of users holding it."""
        page = await self._users.get_users(backend, page=1, limit=ALL_USERS_LIMIT)
        return [
            RoleSummary(
                name=role.value,
                description=role.description,
                user_count=sum(1 for user in page.items if user.has_role(role.value)),
            )
            for role in KnownRole
        ]

    async def suggest_roles(self, backend: UserHubBackend, job_title: str) -> list[Role]:
        """
        Ask the backend's suggestion service for roles fitting a job title.

        Strings outside the known vocabulary come back as SuggestedRole and
        must be confirmed by an administrator before being assigned.
        """
        response = await backend.suggest_roles(job_title)
        suggested = (response or {}).get("suggestedRoles") or []

        roles: list[Role] = []
        for raw in suggested:
            if not isinstance(raw, str) or not raw.strip():
                continue
            role = parse_role(raw)
            if role not in roles:
                roles.append(role)

        logger.info(f"Received {len(roles)} role suggestions for job title")
        return roles
