# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from threading import Lock

from communion_hub.domain.users.entities import SessionToken
from communion_hub.domain.users.repositories import SessionTokenRepository


def _utcnow() -> datetime:
    return datetime.now(UTC)


class InMemorySessionTokenRepository(SessionTokenRepository):
    """One live token per user; issuing a new one replaces the old."""

    def __init__(
        self,
        lifetime: timedelta = timedelta(days=1),
        *,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._lifetime = lifetime
        self._clock = clock
        self._tokens: dict[str, SessionToken] = {}
        self._lock = Lock()

    def replace_for_user(self, user_id: int) -> SessionToken:
        with self._lock:
            for value, existing in list(self._tokens.items()):
                if existing.user_id == user_id:
                    del self._tokens[value]
            token = SessionToken(
                user_id=user_id,
                token=secrets.token_urlsafe(48),
                expires_at=self._clock() + self._lifetime,
            )
            self._tokens[token.token] = token
            return token

    def resolve(self, token: str) -> int | None:
        if not token:
            return None
        with self._lock:
            row = self._tokens.get(token)
            if row is None:
                return None
            if row.expires_at <= self._clock():
                del self._tokens[token]
                return None
            return row.user_id

    def revoke(self, token: str) -> None:
        with self._lock:
            self._tokens.pop(token, None)

    def active_count(self) -> int:
        now = self._clock()
        with self._lock:
            return sum(1 for row in self._tokens.values() if row.expires_at > now)
