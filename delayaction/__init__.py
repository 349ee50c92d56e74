"""
delayaction - a wait action for automation runners

Reads a delay in milliseconds, waits that long without blocking the event
loop, and publishes the time it finished as an output.

Quick Start:
    >>> from delayaction import run, wait
    >>>
    >>> # Wait inside your own coroutine
    >>> await wait(250)
    >>>
    >>> # Run the whole action against the GitHub Actions environment
    >>> action_run = await run()
"""

__version__ = "0.1.0"

# Core primitive
from delayaction.primitives.wait import wait

# Entry routine
from delayaction.main import run

# Exceptions
from delayaction.core.exceptions import (
    ActionError,
    ContextError,
    InputRequiredError,
    InvalidDurationError,
)

# Context access
from delayaction.core.context import ActionContext, get_current_context, has_current_context

# Run records
from delayaction.core.schemas import ActionRun, RunStatus

# Hosts
from delayaction.host.base import ActionHost
from delayaction.host.github import GitHubActionsHost

# Logging and observability
from delayaction.observability.logging import (
    bind_run_context,
    configure_logging,
)

__all__ = [
    # Version
    "__version__",
    # Primitives
    "wait",
    # Execution
    "run",
    # Exceptions
    "ActionError",
    "ContextError",
    "InputRequiredError",
    "InvalidDurationError",
    # Context
    "ActionContext",
    "get_current_context",
    "has_current_context",
    # Runs
    "ActionRun",
    "RunStatus",
    # Hosts
    "ActionHost",
    "GitHubActionsHost",
    # Logging
    "configure_logging",
    "bind_run_context",
]
