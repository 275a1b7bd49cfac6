"""
Error-handling demos: an out-of-range read and a domain validation failure.
Both errors are caught where they occur and reported on stdout.
"""

from __future__ import annotations

from src.domains.errors import InvalidInputError, check_input
from src.utils.logger import get_logger

logger = get_logger()


def index_error_demo() -> str:
    """Read past the end of a three-element list and report the IndexError."""
    numbers = [1, 2, 3]
    try:
        result = numbers[4]
        line = f"Result: {result}"
    except IndexError as e:
        logger.debug("Caught IndexError: %s", e)
        line = f"Exception caught: {e}"
    print(line)
    return line


def custom_exception_demo(value: str | None = "") -> str:
    """Validate value with check_input and report the InvalidInputError if raised."""
    try:
        check_input(value)
        line = f"Input accepted: {value}"
    except InvalidInputError as e:
        logger.debug("Caught InvalidInputError: %s", e)
        line = f"Custom exception thrown: {e}"
    print(line)
    return line
