"""Completion store: one progress cursor per user.

``highestLevelCompleted`` is raised automatically to ``currentLevel`` when the
caller leaves it out. An explicit value always wins, even when it is lower
than the stored one or below ``currentLevel``.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from .errors import InvalidInput
from .keys import require_user_id
from .schemas import CompletionRecord, CompletionSave

logger = logging.getLogger(__name__)

DEFAULT_LEVEL = 1
DEFAULT_HIGHEST_COMPLETED = 0


class CompletionStore:
    def __init__(self) -> None:
        self._records: Dict[str, CompletionRecord] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def get(self, user_id: str) -> Optional[CompletionRecord]:
        user_id = require_user_id(user_id)
        with self._lock:
            return self._records.get(user_id)

    def save(self, user_id: str, payload: Mapping[str, Any]) -> CompletionRecord:
        user_id = require_user_id(user_id)
        try:
            req = CompletionSave.model_validate(payload)
        except ValidationError as exc:
            raise InvalidInput("currentLevel must be a number") from exc

        with self._lock:
            baseline = self._records.get(user_id) or CompletionRecord(
                user_id=user_id,
                current_level=DEFAULT_LEVEL,
                highest_level_completed=DEFAULT_HIGHEST_COMPLETED,
            )
            if req.highest_level_completed is not None:
                highest = req.highest_level_completed
            else:
                highest = max(baseline.highest_level_completed, req.current_level)
            record = baseline.model_copy(update={
                "current_level": req.current_level,
                "highest_level_completed": highest,
            })
            self._records[user_id] = record
        logger.info(
            "save_completion user_id=%s current_level=%s highest_level_completed=%s",
            user_id,
            record.current_level,
            record.highest_level_completed,
        )
        return record
