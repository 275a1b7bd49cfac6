"""Domain errors and input validation."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a required input is missing or empty."""


def check_input(value: str | None) -> str:
    """
    Return value unchanged if it is a non-empty string.

    Raises:
        InvalidInputError: If value is None or empty.
    """
    if value is None or value == "":
        raise InvalidInputError("Input is null or empty")
    return value
