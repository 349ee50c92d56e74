"""
Abstract base class for action hosts.

A host is the automation platform the action runs inside. It supplies inputs
and runner context, receives log lines and outputs, and is told when the run
fails. The entry routine only talks to this interface, so it can run against
the GitHub Actions runner or an in-memory host in tests.
"""

from abc import ABC, abstractmethod

from delayaction.core.context import ActionContext


class ActionHost(ABC):
    """
    Abstract base class for action host runtimes.

    Hosts are responsible for:
    - Reading action inputs
    - Accepting log messages at debug/info/warning/error level
    - Publishing named outputs for downstream steps
    - Recording failure of the run

    exit_code is 0 until set_failed() is called.
    """

    exit_code: int = 0

    @property
    @abstractmethod
    def context(self) -> ActionContext:
        """Runner context, including the triggering event payload."""
        pass

    @abstractmethod
    def get_input(
        self, name: str, required: bool = False, trim_whitespace: bool = True
    ) -> str:
        """
        Read an action input.

        Args:
            name: Input name as declared in action.yml
            required: Raise if the input is missing or empty
            trim_whitespace: Strip leading/trailing whitespace

        Returns:
            Input value, or "" if not supplied

        Raises:
            InputRequiredError: If required and not supplied
        """
        pass

    @abstractmethod
    def debug(self, message: str) -> None:
        """Write a debug message (only shown when debugging is enabled)."""
        pass

    @abstractmethod
    def info(self, message: str) -> None:
        """Write an informational message."""
        pass

    @abstractmethod
    def warning(self, message: str) -> None:
        """Write a warning annotation."""
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        """Write an error annotation."""
        pass

    @abstractmethod
    def set_output(self, name: str, value: str) -> None:
        """
        Publish an output value for downstream steps.

        Args:
            name: Output name as declared in action.yml
            value: Output value
        """
        pass

    def set_failed(self, message: str) -> None:
        """
        Mark the run as failed.

        Sets a non-zero exit code and logs the message as an error.

        Args:
            message: Human-readable failure reason
        """
        self.exit_code = 1
        self.error(message)

    def is_debug(self) -> bool:
        """Whether the runner has step debug logging enabled."""
        return self.context.runner_debug
