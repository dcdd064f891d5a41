# src/argument_delimiter/delimiting/errors.py

"""
errors.py.

Does: Define the error taxonomy for configuration edits and scans, plus the
      Role enum naming what a character is reserved for.
Returns: ArgumentDelimiterError base, InvalidInput, OutOfRange, RoleConflict, Role.
Used by: configuration (mutation checks) and tokenizer (argument checks).
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "Role",
    "ArgumentDelimiterError",
    "InvalidInput",
    "OutOfRange",
    "RoleConflict",
]

__docformat__ = "google"


class Role(str, Enum):
    """Mutually exclusive roles a character can hold in a configuration."""

    DELIMITER = "delimiter"
    OPEN_QUOTE = "open quote"
    CLOSE_QUOTE = "close quote"

    def __str__(self) -> str:
        return self.value

    @property
    def described(self) -> str:
        article = "an" if self.value[0] in "aeiou" else "a"
        return f"{article} {self.value}"


class ArgumentDelimiterError(Exception):
    """Base class for every error raised by this package's core."""


class InvalidInput(ArgumentDelimiterError, TypeError):
    """Raise when an input string or character is missing or of the wrong type."""


class OutOfRange(ArgumentDelimiterError, IndexError):
    """Raise when start/end/length selectors don't fit the input's bounds."""

    def __init__(self, name: str, value: int, message: str):
        self.name = name
        self.value = value
        super().__init__(f"{name}={value}: {message}")


class RoleConflict(ArgumentDelimiterError, ValueError):
    """Raise when a mutation would give a character a second role.

    `char` is the offending character and `role` the role it already holds.
    """

    def __init__(self, char: str, role: Role, message: str | None = None):
        self.char = char
        self.role = role
        super().__init__(message or f"{char!r} is already {role.described}")
