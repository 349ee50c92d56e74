"""
GitHub Actions host.

Talks to the GitHub Actions runner the way the official toolkit does:
- Inputs come from INPUT_<NAME> environment variables
- Log levels and annotations are workflow commands ("::debug::message")
  written to stdout
- Outputs are appended to the file named by GITHUB_OUTPUT, or written as the
  legacy set-output command when that variable is absent
- The process exit code signals failure
"""

import os
import sys
import uuid
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO

from loguru import logger

from delayaction.core.context import ActionContext
from delayaction.core.exceptions import ActionError, InputRequiredError
from delayaction.host.base import ActionHost


def escape_data(value: Any) -> str:
    """Escape command data so it fits on a single line."""
    return str(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: Any) -> str:
    """Escape a command property value."""
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_command(
    command: str, message: Any = "", properties: Optional[Dict[str, Any]] = None
) -> str:
    """
    Format a workflow command line.

    Examples:
        >>> format_command("debug", "hello")
        '::debug::hello'
        >>> format_command("set-output", "12:00", {"name": "time"})
        '::set-output name=time::12:00'
    """
    line = f"::{command}"
    if properties:
        rendered = ",".join(
            f"{key}={escape_property(value)}"
            for key, value in properties.items()
            if value is not None
        )
        if rendered:
            line += f" {rendered}"
    return f"{line}::{escape_data(message)}"


def input_env_name(name: str) -> str:
    """Environment variable the runner uses for an input name."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


class GitHubActionsHost(ActionHost):
    """
    Host implementation for the GitHub Actions runner.

    Args:
        env: Environment mapping (defaults to os.environ)
        stream: Stream for workflow commands (defaults to sys.stdout)
        context: Pre-built context (defaults to ActionContext.from_env(env))

    Example:
        host = GitHubActionsHost()
        delay = host.get_input("milliseconds", required=True)
        host.set_output("time", "12:00:00")
    """

    def __init__(
        self,
        env: Optional[Mapping[str, str]] = None,
        stream: Optional[TextIO] = None,
        context: Optional[ActionContext] = None,
    ) -> None:
        self._env = env if env is not None else os.environ
        self._stream = stream
        self._context = context
        self.exit_code = 0

    @property
    def context(self) -> ActionContext:
        if self._context is None:
            self._context = ActionContext.from_env(self._env)
        return self._context

    def get_input(
        self, name: str, required: bool = False, trim_whitespace: bool = True
    ) -> str:
        value = self._env.get(input_env_name(name), "")
        if required and not value:
            raise InputRequiredError(name)

        if trim_whitespace:
            value = value.strip()
        return value

    def debug(self, message: str) -> None:
        self._issue(format_command("debug", message))

    def info(self, message: str) -> None:
        self._issue(message)

    def warning(self, message: str) -> None:
        self._issue(format_command("warning", message))

    def error(self, message: str) -> None:
        self._issue(format_command("error", message))

    def set_output(self, name: str, value: str) -> None:
        output_path = self._env.get("GITHUB_OUTPUT", "")
        if output_path:
            self._append_file_command(output_path, name, value)
            return

        # Runners without GITHUB_OUTPUT still understand the legacy command
        self._issue("")
        self._issue(format_command("set-output", value, {"name": name}))

    def set_failed(self, message: str) -> None:
        logger.debug("Marking action run as failed", error=message)
        super().set_failed(message)

    def _issue(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(line + "\n")
        stream.flush()

    def _append_file_command(self, path: str, name: str, value: str) -> None:
        file_path = Path(path)
        if not file_path.exists():
            raise ActionError(f"Missing file at path: {path}")

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in name:
            raise ActionError(
                f"Unexpected input: name should not contain the delimiter {delimiter}"
            )
        if delimiter in value:
            raise ActionError(
                f"Unexpected input: value should not contain the delimiter {delimiter}"
            )

        with file_path.open("a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")

        logger.debug("Wrote output {} to {}", name, path, output=name)
