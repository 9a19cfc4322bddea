"""Runtime settings, read from the environment."""

import os
from typing import Any, Dict

DEFAULT_API_PREFIX = "/api"
DEFAULT_CORS_ORIGIN = "http://localhost:5173"
DEFAULT_PORT = 3000


def load_config() -> Dict[str, Any]:
    return {
        "API_PREFIX": os.environ.get("API_PREFIX", DEFAULT_API_PREFIX),
        "CORS_ORIGIN": os.environ.get("CORS_ORIGIN", DEFAULT_CORS_ORIGIN),
        "HOST": os.environ.get("HOST", "0.0.0.0"),
        "PORT": int(os.environ.get("PORT", DEFAULT_PORT)),
        "LOG_LEVEL": os.environ.get("LOG_LEVEL", "INFO").upper(),
    }
