"""
Exception classes for action error handling.

Every failure the action can report derives from ActionError. The entry
routine catches these (and any other Exception), reports the message to the
host and marks the run as failed. There is no retry.
"""

from typing import Any


class ActionError(Exception):
    """Base exception for all action-related errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputRequiredError(ActionError):
    """Raised when a required action input is missing or empty."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Input required and not supplied: {name}")
        self.name = name


class InvalidDurationError(ActionError):
    """
    Raised when a delay duration cannot be used.

    Covers values that are not numbers (including NaN), negative durations and
    infinite durations.

    Example:
        await wait("abc")  # InvalidDurationError: milliseconds not a number
    """

    def __init__(self, value: Any, message: str = "milliseconds not a number") -> None:
        super().__init__(message)
        self.value = value


class ContextError(ActionError):
    """Raised when the action context is not available."""

    pass
