# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Community events backend: event browsing and password-based sessions."""

__version__ = "0.1.0"
