from .entities import SessionToken, User
from .exceptions import (
    InvalidCredentialsError,
    MalformedCredentialError,
    UserAlreadyExistsError,
)
from .repositories import PasswordHasher, SessionTokenRepository, UserRepository

__all__ = [
    "InvalidCredentialsError",
    "MalformedCredentialError",
    "PasswordHasher",
    "SessionToken",
    "SessionTokenRepository",
    "User",
    "UserAlreadyExistsError",
    "UserRepository",
]
