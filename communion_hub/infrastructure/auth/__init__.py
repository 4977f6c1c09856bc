# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import wraps
from typing import cast

from flask import Request, current_app, g, request

from communion_hub.domain.users.repositories import SessionTokenRepository
from communion_hub.shared.errors import UnauthorizedError
from communion_hub.shared.logging import logger

AUTH_COOKIE = "auth_token"
SESSION_TOKENS_EXTENSION = "communion_hub.session_tokens"


class AuthedRequest(Request):
    user_id: int


def authed_request() -> AuthedRequest:
    """Return the current request cast to include authentication attributes."""
    return cast(AuthedRequest, request)


def request_token() -> str:
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Bearer "):
        token = auth[7:].strip()
        if token:
            return token
    return request.cookies.get(AUTH_COOKIE, "")


def session_tokens() -> SessionTokenRepository:
    return cast(SessionTokenRepository, current_app.extensions[SESSION_TOKENS_EXTENSION])


def auth_required(f):
    @wraps(f)
    def inner(*a, **kw):
        token = request_token()
        if not token:
            logger.warning(
                f"No Authorization header/cookie on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise UnauthorizedError()

        user_id = session_tokens().resolve(token)
        if user_id is None:
            logger.warning(
                f"Auth failed (token not found/expired) on {request.method} {request.path}"
            )
            raise UnauthorizedError()

        request.user_id = user_id  # type: ignore[attr-defined]
        g.user_id = user_id
        logger.debug(f"Auth OK: user={user_id} {request.method} {request.path}")
        return f(*a, **kw)

    return inner


__all__ = [
    "AUTH_COOKIE",
    "SESSION_TOKENS_EXTENSION",
    "AuthedRequest",
    "auth_required",
    "authed_request",
    "request_token",
    "session_tokens",
]
