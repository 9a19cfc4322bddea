# /stores/schemas.py
"""
Pydantic models for the player-state stores.

- Records are what the stores hold and what the API returns.
- Payload models describe the partial updates accepted by each store.
- Wire names are camelCase (``userId``, ``maxHealth`` ...); Python attributes
  are snake_case. Use ``to_json()`` to get the wire dict.
- Numbers follow JSON rules: finite ints and floats are accepted; booleans,
  strings, NaN and Infinity are not. An integral float (``3.0``) is stored
  as ``3``.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, Dict, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


def is_number(value: Any) -> bool:
    """True for finite JSON numbers; ``bool`` is an ``int`` subclass but not a number here."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def normalize_number(value: Union[int, float]) -> Union[int, float]:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _require_number(value: Any) -> Union[int, float]:
    if not is_number(value):
        raise ValueError("must be a number")
    return normalize_number(value)


Number = Annotated[Union[int, float], BeforeValidator(_require_number)]


class _WireModel(BaseModel):
    # payloads are read by wire name only
    model_config = ConfigDict(alias_generator=to_camel)

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class _Record(_WireModel):
    # key fields never change after creation; updates go through model_copy
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# =========================
# Records
# =========================

class HealthRecord(_Record):
    user_id: str
    health: Number
    max_health: Number


class Vector3(_Record):
    x: Number
    y: Number
    z: Number


class PositionRecord(_Record):
    user_id: str
    level: Number
    position: Vector3


class CompletionRecord(_Record):
    user_id: str
    current_level: Number
    highest_level_completed: Number


# =========================
# Partial updates
# =========================

class HealthUpdate(_WireModel):
    health: Number
    max_health: Optional[Number] = None


class PositionSave(_WireModel):
    level: Number
    position: Vector3


class CompletionSave(_WireModel):
    current_level: Number
    highest_level_completed: Optional[Number] = None

    @field_validator("highest_level_completed", mode="before")
    @classmethod
    def _drop_non_numeric(cls, v):
        # anything that is not a number means "not supplied"
        return v if is_number(v) else None
