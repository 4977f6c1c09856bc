# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from communion_hub.shared.errors.base import DomainError


class UserAlreadyExistsError(DomainError):
    code = "user_already_exists"
    status = HTTPStatus.CONFLICT


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.UNAUTHORIZED


class MalformedCredentialError(DomainError):
    """Stored credential material could not be parsed."""

    code = "malformed_credential"
    status = HTTPStatus.INTERNAL_SERVER_ERROR
