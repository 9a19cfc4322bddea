"""Errors raised by the player-state stores.

Every error is raised before the store is touched, so a failed call never
leaves a half-written record behind.
"""


class StateError(Exception):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class MissingIdentifier(StateError):
    def __init__(self, message: str = "userId is required"):
        super().__init__("E_NO_USER", message)


class InvalidInput(StateError):
    def __init__(self, message: str):
        super().__init__("E_INVALID", message)
