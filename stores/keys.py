"""Record keys.

Health and completion are keyed by user only; position is keyed by
``(user_id, level)``. Keep the two schemes separate.
"""

import math
from typing import Any, Tuple, Union

from .errors import InvalidInput, MissingIdentifier
from .schemas import is_number, normalize_number


def require_user_id(user_id: Any) -> str:
    if not isinstance(user_id, str) or not user_id:
        raise MissingIdentifier()
    return user_id


def parse_level(raw: Any, default: int = 1) -> Union[int, float]:
    """Coerce a level from a query string or JSON value.

    ``None`` (no ``?level=``) means ``default``; a blank value means level 0.
    """
    if raw is None:
        return default
    if isinstance(raw, str) and not raw.strip():
        return 0
    if is_number(raw):
        value = raw
    else:
        try:
            value = float(str(raw).strip())
        except ValueError:
            raise InvalidInput("level must be a number") from None
    if not math.isfinite(value):
        raise InvalidInput("level must be a number")
    return normalize_number(value)


def position_key(user_id: str, level: Union[int, float]) -> Tuple[str, Union[int, float]]:
    return (user_id, normalize_number(level))
