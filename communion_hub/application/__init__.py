# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.events import (
    CreateEventUseCase,
    GetEventUseCase,
    ListCategoriesUseCase,
    ListEventsUseCase,
)
from .use_cases.users import (
    GetCurrentUserUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
    RegisterUserUseCase,
)

__all__ = [
    "CreateEventUseCase",
    "GetCurrentUserUseCase",
    "GetEventUseCase",
    "ListCategoriesUseCase",
    "ListEventsUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RegisterUserUseCase",
]
