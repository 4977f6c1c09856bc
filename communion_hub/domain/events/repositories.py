# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Event, EventDraft, EventFilter


class EventRepository(Protocol):
    def create_event(self, draft: EventDraft) -> Event: ...
    def get_event(self, event_id: int) -> Event | None: ...
    def get_events(self, event_filter: EventFilter | None = None) -> list[Event]: ...
    def get_event_categories(self) -> list[str]: ...
