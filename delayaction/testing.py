"""
Testing utilities for delayaction.

Provides an in-memory host and a local runner so the action can be exercised
in unit tests without a GitHub Actions runner.

These helpers should ONLY be used in tests, not in production code.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from loguru import logger

from delayaction.core.context import ActionContext
from delayaction.core.exceptions import InputRequiredError
from delayaction.core.schemas import ActionRun
from delayaction.host.base import ActionHost


@dataclass
class LogRecord:
    """A message captured by InMemoryHost."""

    level: str
    message: str


class InMemoryHost(ActionHost):
    """
    Host that keeps inputs, logs and outputs in memory.

    Args:
        inputs: Input values keyed by input name
        payload: Event payload exposed through the context
        context: Full context to expose (payload is ignored if given)

    Example:
        host = InMemoryHost(inputs={"milliseconds": "10"})
        await run(host)
        assert "time" in host.outputs
    """

    def __init__(
        self,
        inputs: Optional[Dict[str, str]] = None,
        payload: Optional[Dict[str, Any]] = None,
        context: Optional[ActionContext] = None,
    ) -> None:
        self.inputs = dict(inputs or {})
        self._context = context or ActionContext(payload=dict(payload or {}))
        self.logs: List[LogRecord] = []
        self.outputs: Dict[str, str] = {}
        self.failure: Optional[str] = None
        self.exit_code = 0

    @property
    def context(self) -> ActionContext:
        return self._context

    def get_input(
        self, name: str, required: bool = False, trim_whitespace: bool = True
    ) -> str:
        value = self.inputs.get(name, "")
        if required and not value:
            raise InputRequiredError(name)
        return value.strip() if trim_whitespace else value

    def debug(self, message: str) -> None:
        self.logs.append(LogRecord("debug", message))

    def info(self, message: str) -> None:
        self.logs.append(LogRecord("info", message))

    def warning(self, message: str) -> None:
        self.logs.append(LogRecord("warning", message))

    def error(self, message: str) -> None:
        self.logs.append(LogRecord("error", message))

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value

    def set_failed(self, message: str) -> None:
        self.failure = message
        super().set_failed(message)

    def messages(self, level: str) -> List[str]:
        """Messages logged at a level, in order."""
        return [record.message for record in self.logs if record.level == level]


async def run_local(
    milliseconds: Any = "0",
    payload: Optional[Dict[str, Any]] = None,
) -> Tuple[ActionRun, InMemoryHost]:
    """
    Run the action once against an InMemoryHost (for testing only).

    Args:
        milliseconds: Raw value for the milliseconds input
        payload: Event payload

    Returns:
        The ActionRun and the host it ran against

    Examples:
        action_run, host = await run_local("100")
        assert action_run.status == RunStatus.COMPLETED
    """
    from delayaction.main import run

    host = InMemoryHost(inputs={"milliseconds": str(milliseconds)}, payload=payload)

    logger.info("Running action locally (test mode)", milliseconds=milliseconds)

    action_run = await run(host)
    return action_run, host
