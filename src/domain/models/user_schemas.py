from typing import Any, ClassVar

from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from src.base.models.user import User
from src.domain.models.form_base import FormModel


def _clean_roles(roles: list[str]) -> list[str]:
    cleaned = [r.strip() for r in roles if r and r.strip()]
    if not cleaned:
        raise ValueError("At least one role must be selected.")
    return list(dict.fromkeys(cleaned))


class UserForm(FormModel):
    """Create-user form."""

    secret_fields: ClassVar[frozenset[str]] = frozenset({"password"})

    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr
    password: str | None = None
    job_title: str | None = None
    roles: list[str] = Field(..., min_length=1)
    account_non_expired: bool = True
    account_non_locked: bool = True
    credentials_non_expired: bool = True
    enabled: bool = True

    @field_validator("roles")
    @classmethod
    def roles_not_blank(cls, v: list[str]) -> list[str]:
        return _clean_roles(v)

    def to_backend(self) -> dict[str, Any]:
        data = super().to_backend()
        data["roles"] = ",".join(self.roles)
        if not self.password:
            data.pop("password", None)
        return data


class UserUpdateForm(UserForm):
    """Edit-user form; the password is never changed through it."""

    def to_backend(self) -> dict[str, Any]:
        data = super().to_backend()
        data.pop("password", None)
        return data


class ProfileForm(FormModel):
    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr
    job_title: str | None = None


class ChangePasswordForm(FormModel):
    secret_fields: ClassVar[frozenset[str]] = frozenset(
        {"current_password", "new_password", "confirm_password"}
    )

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8)
    confirm_password: str

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, v: str, info: ValidationInfo) -> str:
        if v != info.data.get("new_password"):
            raise ValueError("Passwords do not match.")
        return v

    def to_backend(self) -> dict[str, Any]:
        return {
            "currentPassword": self.current_password,
            "newPassword": self.new_password,
        }


class UserListQuery(BaseModel):
    page: int = Field(1, ge=1)
    limit: int = Field(10, ge=1, le=10000)
    search: str | None = None
    role: str | None = None


class UserListResponse(BaseModel):
    users: list[User]
    total: int
    current_page: int
    total_pages: int
    query: UserListQuery

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class ChangePasswordResult(BaseModel):
    success: bool
    message: str
