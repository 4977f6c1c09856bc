# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime

from communion_hub.domain.events.entities import EventDraft
from communion_hub.domain.events.repositories import EventRepository
from communion_hub.shared.logging import logger

_IMAGE_BASE = "https://images.unsplash.com"

DEMO_EVENTS: tuple[EventDraft, ...] = (
    EventDraft(
        title="Interfaith Prayer Gathering",
        date=datetime(2025, 4, 15, 18, 0),
        location="Community Center, 123 Main St",
        description=(
            "Join us for an evening of shared prayer, reflection, and dialogue "
            "across different faith traditions."
        ),
        category="Religious",
        image=f"{_IMAGE_BASE}/photo-1576267423445-b2e0074d68a4?w=600&h=300&fit=crop",
    ),
    EventDraft(
        title="Community Food Drive",
        date=datetime(2025, 4, 22, 10, 0),
        location="City Park, 789 Park Avenue",
        description=(
            "Help us collect non-perishable food items for local families in need. "
            "All donations welcome!"
        ),
        category="Charity",
        image=f"{_IMAGE_BASE}/photo-1509099836639-18ba1795216d?w=600&h=300&fit=crop",
    ),
    EventDraft(
        title="Multicultural Festival",
        date=datetime(2025, 5, 5, 12, 0),
        location="Community Plaza, 456 Center St",
        description=(
            "Celebrate diversity with food, music, dance, and art from different "
            "cultures around the world."
        ),
        category="Social",
        image=f"{_IMAGE_BASE}/photo-1511632765486-a01980e01a18?w=600&h=300&fit=crop",
    ),
    EventDraft(
        title="Faith Leadership Workshop",
        date=datetime(2025, 5, 12, 9, 0),
        location="Community College, 321 Education Blvd",
        description=(
            "A workshop on community leadership and organization for faith leaders "
            "and interested community members."
        ),
        category="Educational",
        image=f"{_IMAGE_BASE}/photo-1526948128573-703ee1aeb6fa?w=600&h=300&fit=crop",
    ),
    EventDraft(
        title="Youth Mentorship Program",
        date=datetime(2025, 5, 20, 16, 0),
        location="Youth Center, 555 Community Ln",
        description=(
            "Connect with youth in our community through our mentorship program. "
            "Training provided for all mentors."
        ),
        category="Community",
        image=f"{_IMAGE_BASE}/photo-1587825140708-dfaf72ae4b04?w=600&h=300&fit=crop",
    ),
    EventDraft(
        title="Community Potluck",
        date=datetime(2025, 6, 1, 17, 30),
        location="Community Garden, 777 Green St",
        description=(
            "Bring a dish to share! A wonderful opportunity to connect over food "
            "and conversation with neighbors."
        ),
        category="Social",
        image=f"{_IMAGE_BASE}/photo-1523580494863-6f3031224c94?w=600&h=300&fit=crop",
    ),
)


def seed_demo_events(store: EventRepository) -> int:
    for draft in DEMO_EVENTS:
        store.create_event(draft)
    logger.info(f"seed.demo_events: loaded {len(DEMO_EVENTS)} events")
    return len(DEMO_EVENTS)
