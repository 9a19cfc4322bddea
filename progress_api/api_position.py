"""Position endpoints, keyed by user and level."""
from flask import Blueprint, jsonify, request

from stores import StateError
from .helpers import error_response, json_body, player_state

bp = Blueprint("position_api", __name__)


@bp.get("/position/<user_id>")
def get_position(user_id: str):
    """Stored position for ``?level=`` (default 1), or a zeroed one if never saved."""
    try:
        record = player_state().position.get(user_id, request.args.get("level"))
    except StateError as err:
        return error_response(err)
    return jsonify(record.to_json()), 200


@bp.post("/position/<user_id>")
def save_position(user_id: str):
    try:
        record = player_state().position.save(user_id, json_body())
    except StateError as err:
        return error_response(err)
    return jsonify(record.to_json()), 201
