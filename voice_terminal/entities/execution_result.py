"""
Execution result entities returned by the executor and navigator.
"""

from dataclasses import dataclass
from enum import Enum


class ExecutionStatus(str, Enum):
    SUCCESS = "success"
    STDERR = "stderr"
    FAILED = "failed"
    BLOCKED = "blocked"
    NAVIGATED = "navigated"
    NAVIGATION_FAILED = "navigation_failed"


@dataclass(frozen=True)
class ProcessOutcome:
    """Raw outcome of a finished child process."""

    returncode: int
    stdout: str = ""
    stderr: str = ""


@dataclass(frozen=True)
class ExecutionResult:
    """Output text for the caller plus the classification it came from."""

    output: str
    status: ExecutionStatus

    @property
    def ok(self) -> bool:
        return self.status in (ExecutionStatus.SUCCESS, ExecutionStatus.NAVIGATED)
