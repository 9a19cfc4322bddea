"""Shared request/response helpers for the blueprints."""

from typing import Any, Dict

from flask import current_app, jsonify, request

from stores import PlayerState, StateError


def player_state() -> PlayerState:
    return current_app.extensions["player_state"]


def json_body() -> Dict[str, Any]:
    """Request body as a dict; missing or non-object bodies become ``{}``."""
    data = request.get_json(force=True, silent=True)
    return data if isinstance(data, dict) else {}


def error_response(err: StateError):
    current_app.logger.warning("%s %s rejected: %s", request.method, request.path, err.message)
    return jsonify(error=err.message), 400
