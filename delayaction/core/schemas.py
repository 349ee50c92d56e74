"""
Data models for action runs.

An ActionRun records the outcome of one invocation of the entry routine.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Dict, Optional


class RunStatus(Enum):
    """Action run execution status."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class ActionRun:
    """
    Represents one execution of the action.

    Outputs hold the string values published to the host, keyed by output name.
    """

    run_id: str
    action_name: str
    status: RunStatus = RunStatus.PENDING
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    # Input/output
    milliseconds: Optional[int] = None
    outputs: Dict[str, str] = field(default_factory=dict)
    error: Optional[str] = None

    def mark_running(self) -> None:
        self.status = RunStatus.RUNNING
        self.started_at = datetime.now(UTC)

    def mark_completed(self) -> None:
        self.status = RunStatus.COMPLETED
        self.completed_at = datetime.now(UTC)

    def mark_failed(self, error: str) -> None:
        self.status = RunStatus.FAILED
        self.error = error
        self.completed_at = datetime.now(UTC)

    @property
    def duration_seconds(self) -> Optional[float]:
        """Wall-clock duration of the run, if it has finished."""
        if self.started_at is None or self.completed_at is None:
            return None
        return (self.completed_at - self.started_at).total_seconds()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "run_id": self.run_id,
            "action_name": self.action_name,
            "status": self.status.value,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "milliseconds": self.milliseconds,
            "outputs": dict(self.outputs),
            "error": self.error,
        }
