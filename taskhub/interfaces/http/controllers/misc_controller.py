# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from http import HTTPStatus

from flask import Blueprint, jsonify
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from taskhub.infrastructure.health import check_database
from taskhub.shared.logging import logger


class MiscController:
    def __init__(self, *, engine: Engine) -> None:
        self._engine = engine

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        try:
            timestamp = check_database(self._engine)
        except SQLAlchemyError as exc:
            logger.error(f"health: database check failed ({type(exc).__name__})")
            return (
                jsonify({"status": "error", "message": "database unavailable"}),
                HTTPStatus.INTERNAL_SERVER_ERROR,
            )
        if isinstance(timestamp, datetime):
            timestamp = timestamp.isoformat()
        return jsonify({"status": "ok", "timestamp": timestamp})
