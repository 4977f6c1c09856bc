from datetime import UTC, datetime, timedelta, timezone

import pytest

from communion_hub.domain import Event, EventFilter, InvariantViolation, normalize_event_date


def _event(**overrides) -> Event:
    fields = {
        "id": 1,
        "title": "Multicultural Festival",
        "date": datetime(2025, 5, 5, 12, tzinfo=UTC),
        "location": "Community Plaza",
        "description": "Food, music, dance and art",
        "category": "Social",
    }
    fields.update(overrides)
    return Event(**fields)


def test_normalize_event_date_accepts_iso_strings() -> None:
    assert normalize_event_date("2025-01-01T00:00:00Z") == datetime(2025, 1, 1, tzinfo=UTC)
    assert normalize_event_date("2025-01-01T02:00:00+02:00") == datetime(2025, 1, 1, tzinfo=UTC)
    assert normalize_event_date("2025-01-01") == datetime(2025, 1, 1, tzinfo=UTC)


def test_normalize_event_date_converts_datetimes_to_utc() -> None:
    eastern = timezone(timedelta(hours=-5))
    normalized = normalize_event_date(datetime(2025, 1, 1, 7, tzinfo=eastern))

    assert normalized == datetime(2025, 1, 1, 12, tzinfo=UTC)
    assert normalized.tzinfo is UTC


def test_normalize_event_date_rejects_garbage() -> None:
    with pytest.raises(InvariantViolation) as exc_info:
        normalize_event_date("next tuesday")

    assert exc_info.value.field == "date"
    assert str(exc_info.value).startswith("date: ")


def test_event_filter_blank_values_match_everything() -> None:
    event_filter = EventFilter(category="", search="")

    assert event_filter.category is None
    assert event_filter.search is None
    assert event_filter.matches(_event()) is True


def test_event_filter_category_is_exact_not_prefix() -> None:
    assert EventFilter(category="SOCIAL").matches(_event()) is True
    assert EventFilter(category="Soc").matches(_event()) is False


def test_event_filter_search_fields() -> None:
    event = _event()

    assert EventFilter(search="festival").matches(event) is True
    assert EventFilter(search="plaza").matches(event) is True
    assert EventFilter(search="MUSIC").matches(event) is True
    assert EventFilter(search="social").matches(event) is False


def test_event_is_immutable() -> None:
    with pytest.raises(AttributeError):
        _event().title = "changed"  # type: ignore[misc]
