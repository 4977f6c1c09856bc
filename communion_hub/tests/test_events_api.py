from __future__ import annotations

import pytest
from flask import Flask

from communion_hub.infrastructure.memory import EventStore


def _create(client, **overrides):
    payload = {
        "title": "Community Food Drive",
        "date": "2025-04-22T10:00:00Z",
        "location": "City Park",
        "description": "Collect non-perishable food items",
        "category": "Charity",
    }
    payload.update(overrides)
    return client.post("/api/events", json=payload)


def test_create_event_returns_201(app: Flask) -> None:
    with app.test_client() as client:
        response = _create(client, image="https://example.com/drive.jpg")

    assert response.status_code == 201
    assert response.get_json() == {
        "id": 1,
        "title": "Community Food Drive",
        "date": "2025-04-22T10:00:00Z",
        "location": "City Park",
        "description": "Collect non-perishable food items",
        "category": "Charity",
        "image": "https://example.com/drive.jpg",
        "authorId": None,
    }


def test_create_event_normalizes_naive_date_and_blank_image(app: Flask, store: EventStore) -> None:
    with app.test_client() as client:
        response = _create(client, date="2025-04-22T10:00:00", image="")

    assert response.status_code == 201
    body = response.get_json()
    assert body["date"] == "2025-04-22T10:00:00Z"
    assert body["image"] is None
    assert store.get_event(body["id"]).image is None


def test_create_event_validation_errors(app: Flask, store: EventStore) -> None:
    with app.test_client() as client:
        response = _create(client, title="  ", date="not a date", image="ftp://x")

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["context"]["fields"] == ["date", "image", "title"]
    assert store.count_events() == 0


def test_list_events_filters_and_sorts(app: Flask) -> None:
    with app.test_client() as client:
        _create(client, title="Prayer", category="Religious", date="2025-04-15T18:00:00Z")
        _create(client, title="Potluck", category="Social", date="2025-06-01T17:30:00Z",
                description="Bring a dish", location="Garden")
        _create(client, title="Festival", category="Social", date="2025-05-05T12:00:00Z",
                description="Food and music", location="Plaza")

        everything = client.get("/api/events").get_json()
        social = client.get("/api/events?category=social").get_json()
        food = client.get("/api/events", query_string={"search": "FOOD"}).get_json()
        blank = client.get("/api/events?category=&search=").get_json()

    assert [event["title"] for event in everything] == ["Potluck", "Festival", "Prayer"]
    assert [event["title"] for event in social] == ["Potluck", "Festival"]
    assert [event["title"] for event in food] == ["Festival", "Prayer"]
    assert blank == everything


def test_get_event_by_id(app: Flask) -> None:
    with app.test_client() as client:
        created = _create(client).get_json()
        found = client.get(f"/api/events/{created['id']}")
        missing = client.get("/api/events/999")
        invalid = client.get("/api/events/abc")

    assert found.status_code == 200
    assert found.get_json() == created
    assert missing.status_code == 404
    assert missing.get_json() == {"error": "event_not_found", "context": {"event_id": 999}}
    assert invalid.status_code == 400
    assert invalid.get_json()["error"] == "invalid_event_id"


def test_event_categories(app: Flask) -> None:
    with app.test_client() as client:
        assert client.get("/api/event-categories").get_json() == []
        _create(client, category="Social")
        _create(client, category="Charity")
        _create(client, category="Social")
        categories = client.get("/api/event-categories").get_json()

    assert categories == ["Social", "Charity"]


def test_health_reports_counts(app: Flask) -> None:
    with app.test_client() as client:
        _create(client)
        response = client.get("/api/health")

    assert response.get_json() == {"ok": True, "events": 1, "users": 0, "sessions": 0}
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Request-ID"]


@pytest.mark.parametrize("event_id", ["0", "-1"])
def test_get_event_non_positive_id_is_not_found(app: Flask, event_id: str) -> None:
    with app.test_client() as client:
        _create(client)
        response = client.get(f"/api/events/{event_id}")

    assert response.status_code == 404
    assert response.get_json()["error"] == "event_not_found"
