"""HTTP client for the progress API.

Mirrors what the game client does: health reads fall back to ``init`` when the
user has no record yet, and ``maxHealth``/``highestLevelCompleted`` are only
sent when given.
"""

from __future__ import annotations

import random
import string
import time
from typing import Any, Dict, Optional

import requests

DEFAULT_BASE_URL = "http://localhost:3000/api"


class ProgressAPIError(Exception):
    def __init__(self, status: int, message: str):
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message


def new_user_id() -> str:
    """Random id in the ``user_<millis>_<suffix>`` shape the game client uses."""
    alphabet = string.ascii_lowercase + string.digits
    suffix = "".join(random.choice(alphabet) for _ in range(9))
    return f"user_{int(time.time() * 1000)}_{suffix}"


def _body(resp: requests.Response) -> Dict[str, Any]:
    try:
        data = resp.json()
    except ValueError:
        return {"error": resp.text}
    return data if isinstance(data, dict) else {"error": str(data)}


class ProgressClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = 10, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        return self.session.request(method, url, timeout=self.timeout, **kwargs)

    def _expect_ok(self, resp) -> Dict[str, Any]:
        data = _body(resp)
        if not 200 <= resp.status_code < 300:
            raise ProgressAPIError(resp.status_code, data.get("error", ""))
        return data

    # -------- Position --------
    def get_position(self, user_id: str, level: int = 1) -> Dict[str, Any]:
        resp = self._request("GET", f"/position/{user_id}", params={"level": level})
        return self._expect_ok(resp)

    def save_position(self, user_id: str, level: int, position: Dict[str, float]) -> Dict[str, Any]:
        resp = self._request("POST", f"/position/{user_id}", json={"level": level, "position": position})
        return self._expect_ok(resp)

    # -------- Health --------
    def get_health(self, user_id: str) -> Dict[str, Any]:
        resp = self._request("GET", f"/health/{user_id}")
        if resp.status_code == 404:
            return self.initialize_health(user_id)
        return self._expect_ok(resp)

    def initialize_health(self, user_id: str) -> Dict[str, Any]:
        return self._expect_ok(self._request("POST", f"/health/{user_id}/init"))

    def update_health(self, user_id: str, health: float, max_health: Optional[float] = None) -> Dict[str, Any]:
        body: Dict[str, Any] = {"health": health}
        if max_health is not None:
            body["maxHealth"] = max_health
        return self._expect_ok(self._request("PUT", f"/health/{user_id}", json=body))

    # -------- Completion --------
    def get_completion(self, user_id: str) -> Optional[Dict[str, Any]]:
        resp = self._request("GET", f"/completion/{user_id}")
        if resp.status_code == 404:
            return None
        return self._expect_ok(resp)

    def save_completion(
        self,
        user_id: str,
        current_level: int,
        highest_level_completed: Optional[int] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {"currentLevel": current_level}
        if highest_level_completed is not None:
            body["highestLevelCompleted"] = highest_level_completed
        return self._expect_ok(self._request("POST", f"/completion/{user_id}", json=body))
