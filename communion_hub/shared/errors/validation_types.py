# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig


class ValidationErrorType:
    BLANK = "blank"
    USERNAME_INVALID_CHARS = "username_invalid_chars"
    PASSWORD_BLANK = "password_blank"


__all__ = ["ValidationErrorType"]
