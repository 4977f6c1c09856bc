# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from communion_hub.application.use_cases.users.current_user import GetCurrentUserUseCase
from communion_hub.application.use_cases.users.login_user import LoginUserUseCase
from communion_hub.application.use_cases.users.logout_user import LogoutUserUseCase
from communion_hub.application.use_cases.users.register_user import RegisterUserUseCase
from communion_hub.domain.users.entities import User
from communion_hub.domain.users.exceptions import (
    InvalidCredentialsError,
    UserAlreadyExistsError,
)
from communion_hub.infrastructure.audit import AuditAction, audit_log
from communion_hub.infrastructure.auth import (
    AUTH_COOKIE,
    auth_required,
    authed_request,
    request_token,
)
from communion_hub.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    LoginRequestDTO,
    RegisterRequestDTO,
    UserDTO,
)
from communion_hub.shared.config import load_config
from communion_hub.shared.errors.validation import validate_payload
from communion_hub.shared.logging import logger
from communion_hub.shared.middleware.csrf import csrf_protect, issue_csrf_cookie
from communion_hub.shared.middleware.rate_limit import rate_limit


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


def _session_response(user: User, token: str, status: int) -> tuple[Response, int]:
    config = load_config()
    response = jsonify(UserDTO.from_entity(user).model_dump())
    response.set_cookie(
        AUTH_COOKIE,
        token,
        httponly=True,
        samesite=config.security.cookie_samesite,
        secure=config.security.cookie_secure,
        max_age=config.security.session_lifetime,
    )
    if config.security.enable_csrf:
        issue_csrf_cookie(response)
    return response, status


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        current_user_use_case: GetCurrentUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._current_user_use_case = current_user_use_case

    @rate_limit(limit=5, window_seconds=60.0)
    def register(self) -> tuple[Response, int]:
        dto = validate_payload(RegisterRequestDTO, request.get_json(silent=True) or {})
        ip_address = _get_client_ip()

        try:
            user, token = self._register_use_case.execute(dto.username, dto.password)
        except UserAlreadyExistsError:
            audit_log(
                AuditAction.REGISTER_FAILED,
                ip_address=ip_address,
                details={"username": dto.username, "reason": "user_already_exists"},
                success=False,
            )
            raise

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=ip_address,
            details={"username": dto.username},
            success=True,
        )
        logger.info(f"auth.register: ok user_id={user.id}")
        return _session_response(user, token, 201)

    @rate_limit(limit=10, window_seconds=60.0)
    def login(self) -> tuple[Response, int]:
        dto = validate_payload(LoginRequestDTO, request.get_json(silent=True) or {})
        ip_address = _get_client_ip()

        try:
            user, token = self._login_use_case.execute(dto.username, dto.password)
        except InvalidCredentialsError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"username": dto.username},
                success=False,
            )
            raise

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            user_id=user.id,
            ip_address=ip_address,
            details={"username": dto.username},
            success=True,
        )
        logger.info(f"auth.login: ok user_id={user.id}")
        return _session_response(user, token, 200)

    @csrf_protect
    def logout(self) -> tuple[Response, int]:
        self._logout_use_case.execute(request_token())

        audit_log(AuditAction.LOGOUT, ip_address=_get_client_ip(), success=True)

        response = jsonify(AuthSuccessDTO().model_dump())
        response.delete_cookie(AUTH_COOKIE)
        logger.info("auth.logout: ok")
        return response, 200

    @auth_required
    def me(self) -> Response:
        user = self._current_user_use_case.execute(authed_request().user_id)
        return jsonify(UserDTO.from_entity(user).model_dump())

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        return bp
