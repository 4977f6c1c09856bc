# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .event_store import EventStore
from .seed import DEMO_EVENTS, seed_demo_events
from .session_tokens import InMemorySessionTokenRepository

__all__ = [
    "DEMO_EVENTS",
    "EventStore",
    "InMemorySessionTokenRepository",
    "seed_demo_events",
]
