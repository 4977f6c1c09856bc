from __future__ import annotations

import os

# Must be set before any communion_hub module reads (and caches) the config.
os.environ["ENABLE_RATE_LIMIT"] = "0"
os.environ["SEED_DEMO_EVENTS"] = "0"
os.environ["SCRYPT_N"] = "1024"
os.environ["ENABLE_CSRF"] = "0"

import pytest
from flask import Flask

from communion_hub.app import create_app
from communion_hub.container import Container
from communion_hub.domain.events.entities import EventDraft
from communion_hub.domain.users.repositories import PasswordHasher
from communion_hub.infrastructure.memory import EventStore
from communion_hub.shared.config import AppConfig


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


def make_draft(**overrides: object) -> EventDraft:
    fields: dict[str, object] = {
        "title": "Community Potluck",
        "date": "2025-06-01T17:30:00Z",
        "location": "Community Garden",
        "description": "Bring a dish to share",
        "category": "Social",
    }
    fields.update(overrides)
    return EventDraft(**fields)  # type: ignore[arg-type]


@pytest.fixture()
def store() -> EventStore:
    return EventStore()


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(seed_demo_events=False)


@pytest.fixture()
def container(app_config: AppConfig, store: EventStore) -> Container:
    return Container(app_config, store=store, password_hasher=DeterministicHasher())


@pytest.fixture()
def app(app_config: AppConfig, container: Container) -> Flask:
    return create_app(app_config, container=container)


@pytest.fixture()
def draft_factory():
    return make_draft


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()
