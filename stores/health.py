"""Health store: one record per user.

``initialize`` is the only read that creates a record. ``update`` merges a
partial ``{health, maxHealth?}`` onto the stored record, or onto a fresh
default when the user has none yet. Health is never clamped.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import ValidationError

from .errors import InvalidInput
from .keys import require_user_id
from .schemas import HealthRecord, HealthUpdate

logger = logging.getLogger(__name__)

DEFAULT_HEALTH = 100
DEFAULT_MAX_HEALTH = 100


class HealthStore:
    def __init__(self) -> None:
        self._records: Dict[str, HealthRecord] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def initialize(self, user_id: str) -> Tuple[HealthRecord, bool]:
        """Return ``(record, created)``; an existing record is never overwritten."""
        user_id = require_user_id(user_id)
        with self._lock:
            existing = self._records.get(user_id)
            if existing is not None:
                return existing, False
            record = HealthRecord(
                user_id=user_id,
                health=DEFAULT_HEALTH,
                max_health=DEFAULT_MAX_HEALTH,
            )
            self._records[user_id] = record
        logger.info("initialize_health user_id=%s", user_id)
        return record, True

    def get(self, user_id: str) -> Optional[HealthRecord]:
        user_id = require_user_id(user_id)
        with self._lock:
            return self._records.get(user_id)

    def update(self, user_id: str, payload: Mapping[str, Any]) -> HealthRecord:
        user_id = require_user_id(user_id)
        try:
            upd = HealthUpdate.model_validate(payload)
        except ValidationError as exc:
            raise InvalidInput(_health_error(exc)) from exc

        with self._lock:
            baseline = self._records.get(user_id) or HealthRecord(
                user_id=user_id,
                health=DEFAULT_HEALTH,
                max_health=upd.max_health if upd.max_health is not None else DEFAULT_MAX_HEALTH,
            )
            record = baseline.model_copy(update={
                "health": upd.health,
                "max_health": upd.max_health if upd.max_health is not None else baseline.max_health,
            })
            self._records[user_id] = record
        logger.info(
            "update_health user_id=%s health=%s max_health=%s",
            user_id,
            record.health,
            record.max_health,
        )
        return record


def _health_error(exc: ValidationError) -> str:
    fields = {err["loc"][0] for err in exc.errors() if err.get("loc")}
    if "health" in fields or not fields:
        return "health must be a number"
    return "maxHealth must be a number"
