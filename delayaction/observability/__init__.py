"""
Observability and logging for delayaction.
"""

from delayaction.observability.logging import (
    bind_run_context,
    configure_logging,
    resolve_log_level,
)

__all__ = [
    "configure_logging",
    "bind_run_context",
    "resolve_log_level",
]
