"""Command execution data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of a remote script that exited successfully."""

    completed_at: datetime
    exit_status: int = 0
