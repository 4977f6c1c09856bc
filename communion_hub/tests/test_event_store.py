from __future__ import annotations

import threading
from datetime import UTC, datetime, timedelta, timezone

import pytest

from communion_hub.domain.events.entities import EventFilter
from communion_hub.domain.users.exceptions import UserAlreadyExistsError
from communion_hub.infrastructure.memory import DEMO_EVENTS, EventStore, seed_demo_events


def test_create_event_on_empty_store_assigns_first_id(store: EventStore, draft_factory) -> None:
    event = store.create_event(
        draft_factory(
            title="A",
            date="2025-01-01T00:00:00Z",
            location="L",
            description="D",
            category="Social",
        )
    )

    assert event.id == 1
    assert event.date == datetime(2025, 1, 1, tzinfo=UTC)
    assert event.image is None
    assert event.author_id is None


def test_get_event_returns_created_record(store: EventStore, draft_factory) -> None:
    draft = draft_factory(image="https://example.com/potluck.jpg")
    created = store.create_event(draft)

    fetched = store.get_event(created.id)

    assert fetched == created
    assert fetched.title == draft.title
    assert fetched.location == draft.location
    assert fetched.description == draft.description
    assert fetched.category == draft.category
    assert fetched.image == draft.image
    assert fetched.date == datetime(2025, 6, 1, 17, 30, tzinfo=UTC)


def test_get_event_missing_returns_none(store: EventStore) -> None:
    assert store.get_event(42) is None


def test_date_passthrough_and_normalization(store: EventStore, draft_factory) -> None:
    naive = store.create_event(draft_factory(date=datetime(2025, 3, 1, 9, 0)))
    offset = store.create_event(
        draft_factory(date=datetime(2025, 3, 1, 11, 0, tzinfo=timezone(timedelta(hours=2))))
    )

    assert naive.date == datetime(2025, 3, 1, 9, 0, tzinfo=UTC)
    assert offset.date == datetime(2025, 3, 1, 9, 0, tzinfo=UTC)
    assert offset.date.tzinfo == UTC


def test_empty_image_defaults_to_none(store: EventStore, draft_factory) -> None:
    assert store.create_event(draft_factory(image="")).image is None


def test_ids_are_monotonic(store: EventStore, draft_factory) -> None:
    ids = [store.create_event(draft_factory()).id for _ in range(5)]
    assert ids == [1, 2, 3, 4, 5]


def test_get_events_sorted_newest_first(store: EventStore, draft_factory) -> None:
    store.create_event(draft_factory(title="middle", date="2025-05-01T00:00:00Z"))
    store.create_event(draft_factory(title="oldest", date="2025-01-01T00:00:00Z"))
    store.create_event(draft_factory(title="newest", date="2025-09-01T00:00:00Z"))

    titles = [event.title for event in store.get_events()]

    assert titles == ["newest", "middle", "oldest"]


def test_get_events_ties_keep_creation_order(store: EventStore, draft_factory) -> None:
    same_day = "2025-05-01T12:00:00Z"
    store.create_event(draft_factory(title="first", date=same_day))
    store.create_event(draft_factory(title="later", date="2025-07-01T00:00:00Z"))
    store.create_event(draft_factory(title="second", date=same_day))
    store.create_event(draft_factory(title="third", date=same_day))

    titles = [event.title for event in store.get_events()]

    assert titles == ["later", "first", "second", "third"]


def test_category_filter_is_case_insensitive_exact(store: EventStore, draft_factory) -> None:
    store.create_event(draft_factory(title="prayer", category="Religious"))
    store.create_event(draft_factory(title="study", category="Religious Studies"))
    store.create_event(draft_factory(title="party", category="Social"))

    result = store.get_events(EventFilter(category="religious"))

    assert [event.title for event in result] == ["prayer"]


def test_search_matches_title_description_or_location(
    store: EventStore, draft_factory
) -> None:
    store.create_event(draft_factory(title="Food Drive", description="x", location="y"))
    store.create_event(draft_factory(title="a", description="Bring FOOD", location="y"))
    store.create_event(draft_factory(title="b", description="x", location="Seafood Hall"))
    store.create_event(draft_factory(title="c", description="x", location="y"))

    result = store.get_events(EventFilter(search="food"))

    assert sorted(event.title for event in result) == ["Food Drive", "a", "b"]


def test_filters_combine_with_and(store: EventStore, draft_factory) -> None:
    store.create_event(draft_factory(title="Food Drive", category="Charity"))
    store.create_event(draft_factory(title="Food Festival", category="Social"))
    store.create_event(draft_factory(title="Clothes Drive", category="Charity"))

    result = store.get_events(EventFilter(category="CHARITY", search="food"))

    assert [event.title for event in result] == ["Food Drive"]


def test_no_matches_is_empty_list(store: EventStore, draft_factory) -> None:
    store.create_event(draft_factory())

    assert store.get_events(EventFilter(search="nothing like this")) == []
    assert EventStore().get_events() == []


def test_categories_distinct_in_first_seen_order(store: EventStore, draft_factory) -> None:
    for category in ("Social", "Charity", "Social", "Religious", "Charity"):
        store.create_event(draft_factory(category=category))

    assert store.get_event_categories() == ["Social", "Charity", "Religious"]


def test_create_user_and_lookups(store: EventStore) -> None:
    alice = store.create_user("alice", "hash-a")
    bob = store.create_user("bob", "hash-b")

    assert (alice.id, bob.id) == (1, 2)
    assert store.get_user(alice.id) == alice
    assert store.get_user_by_username("bob") == bob
    assert store.get_user_by_username("Alice") is None
    assert store.get_user(99) is None


def test_duplicate_username_is_rejected(store: EventStore) -> None:
    store.create_user("alice", "hash-1")

    with pytest.raises(UserAlreadyExistsError) as exc_info:
        store.create_user("alice", "hash-2")

    assert exc_info.value.code == "user_already_exists"
    assert store.count_users() == 1
    assert store.get_user_by_username("alice").password_hash == "hash-1"


def test_concurrent_registration_of_same_username(store: EventStore) -> None:
    barrier = threading.Barrier(8)
    outcomes: list[str] = []
    outcomes_lock = threading.Lock()

    def register() -> None:
        barrier.wait()
        try:
            store.create_user("alice", "hash")
            result = "created"
        except UserAlreadyExistsError:
            result = "conflict"
        with outcomes_lock:
            outcomes.append(result)

    threads = [threading.Thread(target=register) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert outcomes.count("created") == 1
    assert outcomes.count("conflict") == 7
    assert store.count_users() == 1


def test_seed_demo_events_loads_six_events(store: EventStore) -> None:
    assert seed_demo_events(store) == len(DEMO_EVENTS) == 6

    events = store.get_events()
    assert [event.id for event in events] == [6, 5, 4, 3, 2, 1]
    assert store.get_event_categories() == [
        "Religious",
        "Charity",
        "Social",
        "Educational",
        "Community",
    ]
