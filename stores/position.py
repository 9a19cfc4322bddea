"""Position store: one record per ``(user, level)``.

Reads of an unvisited level return a zeroed position that is *not* stored.
Saves replace the whole record at the key; there is no field-level merge.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Mapping, Tuple, Union

from pydantic import ValidationError

from .errors import InvalidInput
from .keys import parse_level, position_key, require_user_id
from .schemas import PositionRecord, PositionSave, Vector3

logger = logging.getLogger(__name__)

ORIGIN = Vector3(x=0, y=0, z=0)

PositionKey = Tuple[str, Union[int, float]]


class PositionStore:
    def __init__(self) -> None:
        self._records: Dict[PositionKey, PositionRecord] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def get(self, user_id: str, level: Any = 1) -> PositionRecord:
        user_id = require_user_id(user_id)
        level = parse_level(level)
        with self._lock:
            stored = self._records.get(position_key(user_id, level))
        if stored is not None:
            return stored
        return PositionRecord(user_id=user_id, level=level, position=ORIGIN)

    def save(self, user_id: str, payload: Mapping[str, Any]) -> PositionRecord:
        user_id = require_user_id(user_id)
        try:
            req = PositionSave.model_validate(payload)
        except ValidationError as exc:
            raise InvalidInput("Invalid position payload") from exc

        record = PositionRecord(user_id=user_id, level=req.level, position=req.position)
        with self._lock:
            self._records[position_key(user_id, req.level)] = record
        logger.info(
            "save_position user_id=%s level=%s x=%s y=%s z=%s",
            user_id,
            record.level,
            record.position.x,
            record.position.y,
            record.position.z,
        )
        return record
