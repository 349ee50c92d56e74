"""
Duration parsing utilities.

The action receives its delay as a raw string input. Parsing follows the
rules of an integer parse in base 10 as the runner's reference toolkit does it:

- leading whitespace is ignored
- an optional "+" or "-" sign is accepted
- the longest run of leading digits is used, trailing text is ignored
- no leading digits at all is an error
"""

import math
import re
from typing import Union

from delayaction.core.exceptions import InvalidDurationError

_INTEGER_PREFIX = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_milliseconds(value: Union[str, int]) -> int:
    """
    Parse a raw input value to an integer number of milliseconds.

    Args:
        value: Raw input, usually the string read from the host

    Returns:
        Parsed integer (may be negative; validation is done by wait())

    Raises:
        InvalidDurationError: If the value does not start with an integer

    Examples:
        >>> parse_milliseconds("1000")
        1000
        >>> parse_milliseconds("  250ms")
        250
        >>> parse_milliseconds("-5")
        -5
    """
    if isinstance(value, bool):
        raise InvalidDurationError(value)

    if isinstance(value, int):
        return value

    if not isinstance(value, str):
        raise InvalidDurationError(value)

    match = _INTEGER_PREFIX.match(value)
    if not match:
        raise InvalidDurationError(value)

    return int(match.group(1))


def validate_milliseconds(milliseconds: Union[int, float]) -> float:
    """
    Check that a duration is a usable delay and convert it to seconds.

    Args:
        milliseconds: Duration in milliseconds

    Returns:
        Duration in seconds

    Raises:
        InvalidDurationError: If the duration is not a finite, non-negative number
    """
    if isinstance(milliseconds, bool) or not isinstance(milliseconds, (int, float)):
        raise InvalidDurationError(milliseconds)

    if isinstance(milliseconds, float):
        if math.isnan(milliseconds):
            raise InvalidDurationError(milliseconds)
        if math.isinf(milliseconds):
            raise InvalidDurationError(
                milliseconds, f"milliseconds must be finite, got {milliseconds}"
            )

    if milliseconds < 0:
        raise InvalidDurationError(
            milliseconds, f"milliseconds must be non-negative, got {milliseconds}"
        )

    return milliseconds / 1000


def format_milliseconds(milliseconds: int) -> str:
    """
    Format milliseconds as a short human-readable duration.

    Examples:
        >>> format_milliseconds(250)
        '250ms'
        >>> format_milliseconds(1500)
        '1.5s'
        >>> format_milliseconds(120000)
        '2m'
    """
    if milliseconds < 1000:
        return f"{milliseconds}ms"

    seconds = milliseconds / 1000
    if seconds < 60:
        return f"{seconds:g}s"

    return f"{seconds / 60:g}m"
