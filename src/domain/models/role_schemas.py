from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from src.base.models.role import KnownRole, Role


class RoleSummary(BaseModel):
    name: str
    description: str
    user_count: int

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class RoleListResponse(BaseModel):
    roles: list[RoleSummary]


class SuggestRolesRequest(BaseModel):
    job_title: str = Field(..., min_length=2, max_length=100, alias="jobTitle")

    model_config = {"populate_by_name": True, "str_strip_whitespace": True}


class SuggestedRoleView(BaseModel):
    name: str
    known: bool
    description: str

    @classmethod
    def from_role(cls, role: Role) -> "SuggestedRoleView":
        return cls(
            name=role.value,
            known=isinstance(role, KnownRole),
            description=role.description,
        )


class SuggestRolesResponse(BaseModel):
    job_title: str = Field(..., alias="jobTitle")
    suggested_roles: list[SuggestedRoleView] = Field(..., alias="suggestedRoles")

    model_config = {"populate_by_name": True}
