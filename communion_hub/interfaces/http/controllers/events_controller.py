# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, jsonify, request

from communion_hub.application.use_cases.events import (
    CreateEventUseCase,
    GetEventUseCase,
    ListCategoriesUseCase,
    ListEventsUseCase,
)
from communion_hub.infrastructure.audit import AuditAction, audit_log
from communion_hub.interfaces.http.dto.events import (
    CreateEventRequestDTO,
    EventDTO,
    EventFilterDTO,
)
from communion_hub.shared.errors import InvalidEventIdError
from communion_hub.shared.errors.validation import validate_payload
from communion_hub.shared.logging import logger
from communion_hub.shared.middleware.csrf import csrf_protect


def _parse_event_id(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise InvalidEventIdError(raw) from None


class EventsController:
    def __init__(
        self,
        *,
        list_events: ListEventsUseCase,
        get_event: GetEventUseCase,
        create_event: CreateEventUseCase,
        list_categories: ListCategoriesUseCase,
    ) -> None:
        self._list_events = list_events
        self._get_event = get_event
        self._create_event = create_event
        self._list_categories = list_categories

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("events", __name__, url_prefix="/api")
        bp.add_url_rule("/events", view_func=self.list_events, methods=["GET"])
        bp.add_url_rule("/events", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/events/<event_id>", view_func=self.get_event, methods=["GET"])
        bp.add_url_rule("/event-categories", view_func=self.categories, methods=["GET"])
        return bp

    def list_events(self) -> Response:
        t0 = perf_counter()
        filters = validate_payload(EventFilterDTO, request.args.to_dict())
        items = self._list_events.execute(category=filters.category, search=filters.search)
        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"events.list: ok (n={len(items)}, category={filters.category!r}, "
            f"search={filters.search!r}, dt_ms={dt:.0f})"
        )
        return jsonify([EventDTO.dump(event) for event in items])

    def get_event(self, event_id: str) -> Response:
        event = self._get_event.execute(_parse_event_id(event_id))
        return jsonify(EventDTO.dump(event))

    @csrf_protect
    def create(self) -> tuple[Response, int]:
        dto = validate_payload(CreateEventRequestDTO, request.get_json(silent=True) or {})
        event = self._create_event.execute(dto.to_draft())

        audit_log(
            AuditAction.EVENT_CREATED,
            details={"event_id": event.id, "category": event.category},
            success=True,
        )
        logger.info(f"events.create: ok (event_id={event.id}, category={event.category})")
        return jsonify(EventDTO.dump(event)), 201

    def categories(self) -> Response:
        return jsonify(self._list_categories.execute())
