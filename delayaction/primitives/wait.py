"""
Wait primitive for action delays.

Suspends the calling coroutine for a number of milliseconds without blocking
the event loop. The wait cannot be shortened once started and produces no
value when it resumes.
"""

import asyncio
from typing import Union

from loguru import logger

from delayaction.core.context import get_current_context, has_current_context
from delayaction.utils.duration import format_milliseconds, validate_milliseconds


async def wait(milliseconds: Union[int, float]) -> None:
    """
    Suspend execution for a number of milliseconds.

    A duration of 0 yields to the event loop once and resumes on the next
    scheduling opportunity. Concurrent waits are independent of each other.

    Args:
        milliseconds: Non-negative duration in milliseconds

    Examples:
        # Wait one second
        await wait(1000)

        # Yield to the event loop
        await wait(0)

    Raises:
        InvalidDurationError: If milliseconds is not a finite, non-negative number
    """
    delay_seconds = validate_milliseconds(milliseconds)

    if has_current_context():
        ctx = get_current_context()
        logger.debug(
            f"Waiting {format_milliseconds(milliseconds)}",
            run_id=ctx.run_id,
            milliseconds=milliseconds,
        )
    else:
        logger.debug(f"Waiting {format_milliseconds(milliseconds)}")

    await asyncio.sleep(delay_seconds)
