from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from communion_hub.domain.users.entities import User
from communion_hub.shared.errors.validation_types import ValidationErrorType

_USERNAME_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


def _check_username(value: str) -> str:
    if not _USERNAME_RE.match(value):
        raise PydanticCustomError(
            ValidationErrorType.USERNAME_INVALID_CHARS,
            "Username may contain only letters, digits, '_', '.' and '-'",
            {"pattern": _USERNAME_RE.pattern},
        )
    return value


class RegisterRequestDTO(BaseModel):
    username: str = Field(min_length=3, max_length=64)
    password: str = Field(min_length=8, max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        return _check_username(value)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError(
                ValidationErrorType.PASSWORD_BLANK,
                "Password cannot be only whitespace",
                {},
            )
        return value


class LoginRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=128)  # No strength check on login


class UserDTO(BaseModel):
    """Public view of a user; credential material never leaves the core."""

    id: int
    username: str

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(id=user.id, username=user.username)


class AuthSuccessDTO(BaseModel):
    ok: bool = True
