# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify
from sqlalchemy.exc import SQLAlchemyError

from authservice.infrastructure.health import probe_database
from authservice.shared.errors.messages import translate
from authservice.shared.logging import logger


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/api", view_func=self.api, methods=["GET"])
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def index(self):
        return jsonify({"message": translate("hello")})

    def api(self):
        return jsonify({"message": translate("api_working")})

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            probe = probe_database()
            status["database"] = "ok"
            status["latency_ms"] = probe["latency_ms"]
        except SQLAlchemyError as exc:
            logger.error(f"health: database check failed ({type(exc).__name__})")
            status["ok"] = False
            status["database"] = "error"
        return jsonify(status), 200 if status["ok"] else 503
