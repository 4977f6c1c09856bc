# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Process-resident store for users and events.

State lives for the lifetime of the process only. Ids come from monotonic
counters and are never handed out twice. Each collection has its own lock,
so every public operation is atomic with respect to the others.
"""

from __future__ import annotations

from itertools import count
from threading import Lock

from communion_hub.domain.events.entities import (
    Event,
    EventDraft,
    EventFilter,
    normalize_event_date,
)
from communion_hub.domain.events.repositories import EventRepository
from communion_hub.domain.users.entities import User
from communion_hub.domain.users.exceptions import UserAlreadyExistsError
from communion_hub.domain.users.repositories import UserRepository
from communion_hub.shared.logging import logger


class EventStore(UserRepository, EventRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._user_ids_by_name: dict[str, int] = {}
        self._user_seq = count(1)
        self._users_lock = Lock()

        # insertion order == creation order; relied on for stable sorting
        self._events: dict[int, Event] = {}
        self._event_seq = count(1)
        self._events_lock = Lock()

    # users

    def create_user(self, username: str, password_hash: str) -> User:
        with self._users_lock:
            if username in self._user_ids_by_name:
                raise UserAlreadyExistsError(context={"username": username})
            user = User(id=next(self._user_seq), username=username, password_hash=password_hash)
            self._users[user.id] = user
            self._user_ids_by_name[username] = user.id
        logger.debug(f"store.create_user: ok user_id={user.id}")
        return user

    def get_user_by_username(self, username: str) -> User | None:
        with self._users_lock:
            user_id = self._user_ids_by_name.get(username)
            return self._users.get(user_id) if user_id is not None else None

    def get_user(self, user_id: int) -> User | None:
        with self._users_lock:
            return self._users.get(user_id)

    def count_users(self) -> int:
        with self._users_lock:
            return len(self._users)

    # events

    def create_event(self, draft: EventDraft) -> Event:
        date = normalize_event_date(draft.date)
        with self._events_lock:
            event = Event(
                id=next(self._event_seq),
                title=draft.title,
                date=date,
                location=draft.location,
                description=draft.description,
                category=draft.category,
                image=draft.image or None,
                author_id=None,
            )
            self._events[event.id] = event
        logger.debug(f"store.create_event: ok event_id={event.id} category={event.category}")
        return event

    def get_event(self, event_id: int) -> Event | None:
        with self._events_lock:
            return self._events.get(event_id)

    def get_events(self, event_filter: EventFilter | None = None) -> list[Event]:
        with self._events_lock:
            events = list(self._events.values())
        if event_filter is not None:
            events = [event for event in events if event_filter.matches(event)]
        # sorted() is stable with reverse=True, so equal dates keep creation order
        return sorted(events, key=lambda event: event.date, reverse=True)

    def get_event_categories(self) -> list[str]:
        with self._events_lock:
            return list(dict.fromkeys(event.category for event in self._events.values()))

    def count_events(self) -> int:
        with self._events_lock:
            return len(self._events)
