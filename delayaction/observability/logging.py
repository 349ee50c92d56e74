"""
Loguru logging configuration for delayaction.

Library diagnostics go through loguru to stderr (and optionally a file).
Workflow commands meant for the runner are written by the host to stdout, so
the two never interleave on the same stream.
"""

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

LOG_LEVEL_ENV = "DELAYACTION_LOG_LEVEL"


def resolve_log_level(level: Optional[str] = None) -> str:
    """
    Pick the log level to configure.

    Order: explicit argument, DELAYACTION_LOG_LEVEL, DEBUG when the runner has
    debug logging enabled (RUNNER_DEBUG=1), otherwise INFO.

    Args:
        level: Explicit level name

    Returns:
        Upper-cased level name
    """
    if level:
        return level.upper()

    env_level = os.getenv(LOG_LEVEL_ENV, "")
    if env_level:
        return env_level.upper()

    if os.getenv("RUNNER_DEBUG") == "1":
        return "DEBUG"

    return "INFO"


def configure_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    json_logs: bool = False,
    show_context: bool = True,
) -> None:
    """
    Configure delayaction logging with loguru.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); see resolve_log_level
        log_file: Optional file path for log output
        json_logs: If True, output logs as serialized JSON records
        show_context: If True, include bound extras (run_id, ...) in log lines

    Examples:
        # Console output at the resolved level
        configure_logging()

        # Debug mode with file output
        configure_logging(level="DEBUG", log_file="action.log")

        # Minimal logs without context
        configure_logging(level="WARNING", show_context=False)
    """
    level = resolve_log_level(level)

    # Remove default logger
    logger.remove()

    if show_context:
        console_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level> | "
            "{extra}"
        )
    else:
        console_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        )

    logger.add(
        sys.stderr,
        format=console_format,
        level=level,
        colorize=not json_logs,
        serialize=json_logs,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
                "{level: <8} | "
                "{name}:{function}:{line} | "
                "{message} | "
                "{extra}"
            ),
            level=level,
            serialize=json_logs,
        )

    logger.debug(f"delayaction logging configured at level {level}")


def bind_run_context(run_id: str, action_name: str):
    """
    Bind action run context to logger.

    This adds run_id and action_name to all messages logged through the
    returned logger.

    Example:
        log = bind_run_context("run_123", "wait")
        log.info("Action started")
    """
    return logger.bind(run_id=run_id, action_name=action_name)
