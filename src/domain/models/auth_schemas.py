from typing import Any, ClassVar

from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator

from src.base.models.user import User
from src.domain.models.form_base import FormModel


class LoginForm(FormModel):
    secret_fields: ClassVar[frozenset[str]] = frozenset({"password"})

    email: EmailStr
    password: str = Field(..., min_length=1)
    remember_me: bool = False

    def to_backend(self) -> dict[str, Any]:
        return {"email": self.email, "password": self.password}


class RegisterForm(FormModel):
    secret_fields: ClassVar[frozenset[str]] = frozenset({"password"})

    first_name: str = Field(..., min_length=2, max_length=50)
    last_name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=8)


class ForgotPasswordForm(FormModel):
    email: EmailStr


class ResetPasswordForm(FormModel):
    secret_fields: ClassVar[frozenset[str]] = frozenset(
        {"token", "password", "confirm_password"}
    )

    token: str = Field(..., min_length=1)
    password: str = Field(..., min_length=8)
    confirm_password: str

    @field_validator("confirm_password")
    @classmethod
    def passwords_match(cls, v: str, info: ValidationInfo) -> str:
        if v != info.data.get("password"):
            raise ValueError("Passwords do not match.")
        return v

    def to_backend(self) -> dict[str, Any]:
        return {"token": self.token, "password": self.password}


class LoginResult(BaseModel):
    token: str
    user: User | None = None


class MessageResponse(BaseModel):
    success: bool = True
    message: str = ""
