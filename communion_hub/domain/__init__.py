# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .events import Event, EventDraft, EventFilter, normalize_event_date
from .exceptions import InvariantViolation, InvariantViolationError
from .users import SessionToken, User

__all__ = [
    "Event",
    "EventDraft",
    "EventFilter",
    "InvariantViolation",
    "InvariantViolationError",
    "SessionToken",
    "User",
    "normalize_event_date",
]
