"""In-memory player-state stores.

``PlayerState`` owns one store per domain. The app factory creates one and
hangs it on ``app.extensions``; tests build their own isolated instances.
Nothing here survives a process restart.
"""

from typing import Any, Dict

from .completion import CompletionStore
from .errors import InvalidInput, MissingIdentifier, StateError
from .health import HealthStore
from .position import PositionStore
from .schemas import CompletionRecord, HealthRecord, PositionRecord, Vector3


class PlayerState:
    def __init__(self) -> None:
        self.health = HealthStore()
        self.position = PositionStore()
        self.completion = CompletionStore()

    def counts(self) -> Dict[str, Any]:
        return {
            "health": len(self.health),
            "position": len(self.position),
            "completion": len(self.completion),
        }


__all__ = [
    "PlayerState",
    "HealthStore",
    "PositionStore",
    "CompletionStore",
    "HealthRecord",
    "PositionRecord",
    "CompletionRecord",
    "Vector3",
    "StateError",
    "MissingIdentifier",
    "InvalidInput",
]
