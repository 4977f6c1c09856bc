# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Domain entities for community events."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from ..exceptions import InvariantViolation


def normalize_event_date(value: datetime | str) -> datetime:
    """Return ``value`` as an aware UTC datetime.

    ISO-8601 strings are parsed, naive values are taken to be UTC and aware
    values are converted, so every stored date compares with every other.
    """

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise InvariantViolation("date is not ISO-8601", field="date") from exc
    if not isinstance(value, datetime):
        raise InvariantViolation("date must be a datetime or ISO string", field="date")
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


@dataclass(slots=True, frozen=True)
class EventDraft:
    """Validated input for a new event; ``date`` is not yet normalized."""

    title: str
    date: datetime | str
    location: str
    description: str
    category: str
    image: str | None = None


@dataclass(slots=True, frozen=True)
class Event:

    id: int
    title: str
    date: datetime
    location: str
    description: str
    category: str
    image: str | None = None
    author_id: int | None = None


@dataclass(slots=True, frozen=True)
class EventFilter:
    """Optional category and free-text constraints, combined with AND."""

    category: str | None = None
    search: str | None = None

    def __post_init__(self) -> None:
        # Blank values mean "no constraint".
        object.__setattr__(self, "category", self.category or None)
        object.__setattr__(self, "search", self.search or None)

    def matches(self, event: Event) -> bool:
        return all(
            [
                self._category_matches(event),
                self._search_matches(event),
            ]
        )

    def _category_matches(self, event: Event) -> bool:
        if self.category is None:
            return True
        return event.category.casefold() == self.category.casefold()

    def _search_matches(self, event: Event) -> bool:
        if self.search is None:
            return True
        needle = self.search.casefold()
        return any(
            needle in haystack.casefold()
            for haystack in (event.title, event.description, event.location)
        )
