# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from communion_hub.infrastructure.memory import EventStore, InMemorySessionTokenRepository


class MiscController:
    def __init__(
        self, *, store: EventStore, session_tokens: InMemorySessionTokenRepository
    ) -> None:
        self._store = store
        self._session_tokens = session_tokens

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        return jsonify(
            {
                "ok": True,
                "events": self._store.count_events(),
                "users": self._store.count_users(),
                "sessions": self._session_tokens.active_count(),
            }
        )
