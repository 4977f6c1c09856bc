from .base import (
    AppError,
    DomainError,
    EventNotFoundError,
    InvalidEventIdError,
    UnauthorizedError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "EventNotFoundError",
    "InvalidEventIdError",
    "UnauthorizedError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
