"""
User entity module.

This module defines the User entity as returned by the User Hub backend.
The backend owns the record; the console only holds request-scoped copies.
"""

import datetime
from typing import Literal

from pydantic import BaseModel, Field, computed_field
from pydantic.alias_generators import to_camel

from src.base.models.role import Role, parse_role, split_roles

UserStatus = Literal["Active", "Disabled"]


class User(BaseModel):
    """
    Represents a managed user account.

    The wire format is camelCase; attributes are snake_case and either
    spelling is accepted. There is no password attribute, so a password
    field sent by the backend is dropped on validation.

    Attributes:
        id: Backend identifier of the user
        first_name: Given name
        last_name: Family name
        email: Email address, also the login name
        job_title: Optional job title
        roles: Comma-separated role names, e.g. "ROLE_USER,ROLE_ADMIN"
        account_non_expired: False once the account has expired
        account_non_locked: False while the account is locked
        credentials_non_expired: False once the password has expired
        enabled: False when an administrator disabled the account
    """

    id: str
    first_name: str
    last_name: str
    email: str
    job_title: str | None = None
    roles: str = ""
    account_non_expired: bool = True
    account_non_locked: bool = True
    credentials_non_expired: bool = True
    enabled: bool = True
    created_date: datetime.datetime | None = None
    updated_date: datetime.datetime | None = None
    last_login_date: datetime.datetime | None = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "coerce_numbers_to_str": True,
        "json_schema_extra": {
            "example": {
                "id": "1",
                "firstName": "Jane",
                "lastName": "Doe",
                "email": "jane.doe@example.com",
                "jobTitle": "Engineering Manager",
                "roles": "ROLE_USER,ROLE_MANAGER",
                "accountNonExpired": True,
                "accountNonLocked": True,
                "credentialsNonExpired": True,
                "enabled": True,
                "createdDate": "2024-01-15T09:30:00Z",
                "updatedDate": "2024-03-01T12:00:00Z",
                "lastLoginDate": None,
            }
        },
    }

    @computed_field(alias="roleList")
    @property
    def role_list(self) -> list[str]:
        return split_roles(self.roles)

    @computed_field(alias="status")
    @property
    def status(self) -> UserStatus:
        if self.enabled and self.account_non_locked and self.account_non_expired:
            return "Active"
        return "Disabled"

    @computed_field(alias="fullName")
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def typed_roles(self) -> list[Role]:
        return [parse_role(r) for r in self.role_list]

    def has_role(self, role_name: str) -> bool:
        return role_name in self.role_list


def parse_user(data: dict | None) -> User | None:
    """Validate a backend user payload, dropping any password field."""
    if not data:
        return None
    return User.model_validate(data)
