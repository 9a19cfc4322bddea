# progress_api/__init__.py
import logging
from typing import Any, Mapping, Optional

from flask import Flask, jsonify, request

from stores import PlayerState
from .config import load_config
from .api_health import bp as health_bp
from .api_position import bp as position_bp
from .api_completion import bp as completion_bp


def _apply_cors(app: Flask) -> None:
    @app.after_request
    def add_cors_headers(response):
        origin = app.config["CORS_ORIGIN"]
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
        response.headers["Vary"] = "Origin"
        if request.method == "OPTIONS":
            response.headers["Access-Control-Allow-Methods"] = "GET,HEAD,PUT,POST,OPTIONS"
            response.headers["Access-Control-Allow-Headers"] = (
                request.headers.get("Access-Control-Request-Headers") or "Content-Type"
            )
        return response


def create_app(config: Optional[Mapping[str, Any]] = None, state: Optional[PlayerState] = None):
    app = Flask(__name__)

    app.config.update(load_config())
    if config:
        app.config.update(config)

    # one store set per app; lives as long as the process
    app.extensions["player_state"] = state if state is not None else PlayerState()

    app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"], logging.INFO))
    app.logger.info("API prefix: %s", app.config["API_PREFIX"])
    app.logger.info("CORS origin: %s", app.config["CORS_ORIGIN"])

    prefix = app.config["API_PREFIX"]
    app.register_blueprint(health_bp, url_prefix=prefix)
    app.register_blueprint(position_bp, url_prefix=prefix)
    app.register_blueprint(completion_bp, url_prefix=prefix)

    _apply_cors(app)

    @app.get("/")
    def index():
        return jsonify(message="API is running")

    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(_err):
        return jsonify(error="Not found"), 404

    return app
