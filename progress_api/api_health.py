"""Health endpoints.

GET  /health/<user_id>       -> stored record or 404
POST /health/<user_id>/init  -> 200 existing / 201 created
PUT  /health/<user_id>       -> merge ``{health, maxHealth?}``
"""
from flask import Blueprint, jsonify

from stores import StateError
from .helpers import error_response, json_body, player_state

bp = Blueprint("health_api", __name__)


@bp.get("/health/<user_id>")
def get_health(user_id: str):
    try:
        record = player_state().health.get(user_id)
    except StateError as err:
        return error_response(err)
    if record is None:
        return jsonify(error="Health not found"), 404
    return jsonify(record.to_json()), 200


@bp.post("/health/<user_id>/init")
def initialize_health(user_id: str):
    try:
        record, created = player_state().health.initialize(user_id)
    except StateError as err:
        return error_response(err)
    return jsonify(record.to_json()), 201 if created else 200


@bp.put("/health/<user_id>")
def update_health(user_id: str):
    try:
        record = player_state().health.update(user_id, json_body())
    except StateError as err:
        return error_response(err)
    return jsonify(record.to_json()), 200
