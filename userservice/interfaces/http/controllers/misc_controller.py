# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, jsonify
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from userservice.infrastructure.db import check_database
from userservice.shared.errors.base import InfrastructureError
from userservice.shared.logging import logger


class MiscController:
    def __init__(self, *, engine: Engine, session_store: object) -> None:
        self._engine = engine
        self._session_store = session_store

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            check_database(self._engine)
            status["database"] = "ok"
        except SQLAlchemyError as exc:
            logger.warning(f"health: database check failed: {type(exc).__name__}")
            status["ok"] = False
            status["database"] = "error"

        ping = getattr(self._session_store, "ping", None)
        try:
            if ping is not None:
                ping()
            status["session_store"] = "ok"
        except InfrastructureError as exc:
            logger.warning(f"health: session store check failed: {exc.code}")
            status["ok"] = False
            status["session_store"] = "error"

        code = HTTPStatus.OK if status["ok"] else HTTPStatus.SERVICE_UNAVAILABLE
        return jsonify(status), code
