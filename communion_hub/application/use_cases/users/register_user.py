# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from communion_hub.domain.users.entities import User
from communion_hub.domain.users.exceptions import UserAlreadyExistsError
from communion_hub.domain.users.repositories import (
    PasswordHasher,
    SessionTokenRepository,
    UserRepository,
)


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> tuple[User, str]:
        # Cheap early exit; create_user is what actually enforces uniqueness.
        if self._users.get_user_by_username(username):
            raise UserAlreadyExistsError(context={"username": username})
        hashed = self._password_hasher.hash(password)
        user = self._users.create_user(username, hashed)
        token = self._tokens.replace_for_user(user.id)
        return user, token.token
