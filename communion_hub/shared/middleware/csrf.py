# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Callable
from functools import wraps

from flask import Flask, Response, jsonify, request

from communion_hub.shared.config import load_config
from communion_hub.shared.logging import logger

SAFE_METHODS: tuple[str, ...] = ("GET", "HEAD", "OPTIONS")
CSRF_COOKIE = "csrf_token"
CSRF_HEADER = "X-CSRF-Token"
_COOKIE_MAX_AGE = 60 * 60 * 24 * 7


def _is_enabled() -> bool:
    return load_config().security.enable_csrf


def issue_csrf_cookie(response: Response) -> None:
    security = load_config().security
    response.set_cookie(
        CSRF_COOKIE,
        secrets.token_urlsafe(32),
        httponly=False,
        samesite=security.cookie_samesite,
        secure=security.cookie_secure,
        max_age=_COOKIE_MAX_AGE,
    )


def configure_csrf(app: Flask) -> None:
    if not _is_enabled():
        return

    @app.after_request
    def _ensure_csrf_cookie(resp: Response) -> Response:
        if request.method in SAFE_METHODS and not request.cookies.get(CSRF_COOKIE):
            issue_csrf_cookie(resp)
        return resp


def csrf_protect(f: Callable):
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not _is_enabled() or request.method in SAFE_METHODS:
            return f(*args, **kwargs)
        header = (request.headers.get(CSRF_HEADER) or "").strip()
        cookie = (request.cookies.get(CSRF_COOKIE) or "").strip()
        if not header or not cookie or not secrets.compare_digest(header, cookie):
            logger.warning(f"csrf: rejected {request.method} {request.path}")
            return jsonify({"error": "csrf"}), 403
        return f(*args, **kwargs)

    return wrapper


__all__ = ["configure_csrf", "csrf_protect", "issue_csrf_cookie"]
