# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from communion_hub.domain.events.entities import Event
from communion_hub.domain.events.repositories import EventRepository
from communion_hub.shared.errors import EventNotFoundError


class GetEventUseCase:
    def __init__(self, *, events: EventRepository) -> None:
        self._events = events

    def execute(self, event_id: int) -> Event:
        event = self._events.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event
