"""Error codes of the map viewer and the exception that carries them."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Status codes used while loading and showing a map."""

    SUCCESS = 0
    INVALID_NUMBER_OF_ARGUMENTS = 1
    OPEN_FILE = 2
    EMPTY_FILE = 3
    NOT_ENOUGH_MEMORY = 4


_MESSAGES = {
    ErrorCode.OPEN_FILE: "Error : could not open map file",
    ErrorCode.EMPTY_FILE: "Error : empty map file",
    ErrorCode.NOT_ENOUGH_MEMORY: "Error : not enough memory",
}


def strerror(code: int) -> str | None:
    """Return the message for ``code``, or None when it has none."""
    try:
        return _MESSAGES.get(ErrorCode(code))
    except ValueError:
        return None


class FdfError(Exception):
    """Raised when a map cannot be loaded or shown."""

    def __init__(self, code: int) -> None:
        self.code = ErrorCode(code)
        message = strerror(self.code) or self.code.name.replace("_", " ").lower()
        super().__init__(message)