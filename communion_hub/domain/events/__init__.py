from .entities import Event, EventDraft, EventFilter, normalize_event_date
from .repositories import EventRepository

__all__ = [
    "Event",
    "EventDraft",
    "EventFilter",
    "EventRepository",
    "normalize_event_date",
]
