"""HTTP routes for the API server."""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, request

from .. import __version__
from ..execution import calculate

logger = logging.getLogger("relcalc.api")


def register_routes(app: Flask) -> None:
    @app.before_request
    def log_request() -> None:
        logger.info(
            "HTTP %s %s from %s",
            request.method,
            request.path,
            request.remote_addr,
        )

    @app.get("/api/info")
    def api_info() -> Any:
        return jsonify(
            {
                "name": "relcalc",
                "version": __version__,
                "endpoints": {
                    "evaluate": "/api/evaluate",
                },
            }
        )

    @app.post("/api/evaluate")
    def evaluate_expression() -> Any:
        payload = request.get_json(force=True, silent=True) or {}
        expression = payload.get("expression") if isinstance(payload, dict) else None
        if not isinstance(expression, str):
            return jsonify({"error": "Field 'expression' must be a string."}), 400

        result = calculate(expression)
        if result.remainder:
            logger.warning("Unconsumed input for %r: %s", expression, result.remainder)
        if not result.success:
            logger.info("Rejected expression %r: %s", expression, result.error)
            return jsonify(result.to_dict()), 422
        return jsonify(result.to_dict())
