# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from communion_hub.domain.events.entities import Event, EventDraft
from communion_hub.domain.events.repositories import EventRepository


class CreateEventUseCase:
    def __init__(self, *, events: EventRepository) -> None:
        self._events = events

    def execute(self, draft: EventDraft) -> Event:
        return self._events.create_event(draft)
