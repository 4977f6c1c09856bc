from .create_event import CreateEventUseCase
from .get_event import GetEventUseCase
from .list_events import ListCategoriesUseCase, ListEventsUseCase

__all__ = [
    "CreateEventUseCase",
    "GetEventUseCase",
    "ListCategoriesUseCase",
    "ListEventsUseCase",
]
