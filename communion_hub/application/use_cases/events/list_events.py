# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from communion_hub.domain.events.entities import Event, EventFilter
from communion_hub.domain.events.repositories import EventRepository


class ListEventsUseCase:
    def __init__(self, *, events: EventRepository) -> None:
        self._events = events

    def execute(self, category: str | None = None, search: str | None = None) -> list[Event]:
        event_filter = EventFilter(category=category, search=search)
        if event_filter.category is None and event_filter.search is None:
            return self._events.get_events()
        return self._events.get_events(event_filter)


class ListCategoriesUseCase:
    def __init__(self, *, events: EventRepository) -> None:
        self._events = events

    def execute(self) -> list[str]:
        return self._events.get_event_categories()
