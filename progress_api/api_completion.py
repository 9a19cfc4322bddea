from flask import Blueprint, jsonify

from stores import StateError
from .helpers import error_response, json_body, player_state

bp = Blueprint("completion_api", __name__)


@bp.get("/completion/<user_id>")
def get_completion(user_id: str):
    try:
        record = player_state().completion.get(user_id)
    except StateError as err:
        return error_response(err)
    if record is None:
        return jsonify(error="Progress not found"), 404
    return jsonify(record.to_json()), 200


@bp.post("/completion/<user_id>")
def save_completion(user_id: str):
    try:
        record = player_state().completion.save(user_id, json_body())
    except StateError as err:
        return error_response(err)
    return jsonify(record.to_json()), 200
