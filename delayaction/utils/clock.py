"""Timestamp helpers for action log lines and outputs."""

from datetime import datetime
from typing import Optional


def time_string(now: Optional[datetime] = None) -> str:
    """
    Render the local time portion of a timestamp with its zone.

    The format matches what a browser-style ``toTimeString()`` produces, e.g.
    ``"14:39:12 GMT+0000 (UTC)"``.

    Args:
        now: Timestamp to render (defaults to the current local time)

    Returns:
        Formatted time string
    """
    if now is None:
        now = datetime.now().astimezone()
    elif now.tzinfo is None:
        now = now.astimezone()

    return f"{now:%H:%M:%S} GMT{now:%z} ({now.tzname()})"
