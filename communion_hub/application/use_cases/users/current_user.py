# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from communion_hub.domain.users.entities import User
from communion_hub.domain.users.repositories import UserRepository
from communion_hub.shared.errors import UnauthorizedError


class GetCurrentUserUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, user_id: int) -> User:
        user = self._users.get_user(user_id)
        if user is None:
            raise UnauthorizedError()
        return user
