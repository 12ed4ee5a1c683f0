"""
Use case for moving a session between directories.
"""

import logging
import os
from typing import Optional

from voice_terminal.entities.execution_result import ExecutionResult, ExecutionStatus
from voice_terminal.entities.session import SessionContext
from voice_terminal.entities.translation import DirectoryChange


class NavigateDirectoryUseCase:
    """Apply a DirectoryChange to a session without spawning a process."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: SessionContext, change: DirectoryChange) -> ExecutionResult:
        """
        Resolve the target against the session directory and move there if it exists.

        Args:
            session: Session whose directory is updated
            change: Requested directory change

        Returns:
            ExecutionResult with NAVIGATED or NAVIGATION_FAILED status; the
            session is left untouched on failure
        """
        with session.lock:
            current = session.cwd
            if change.to_parent:
                new_dir = os.path.dirname(current)
                if new_dir == current or not os.path.isdir(new_dir):
                    self._logger.warning(f"Cannot move back from {current}")
                    return ExecutionResult(
                        f"Cannot move back from {current}",
                        ExecutionStatus.NAVIGATION_FAILED,
                    )
                session.change_directory(new_dir)
                self._logger.info(f"Session '{session.session_id}' moved back to {new_dir}")
                return ExecutionResult(
                    f"Moved back to {session.cwd}", ExecutionStatus.NAVIGATED
                )

            target = change.target
            new_dir = os.path.normpath(
                os.path.join(current, os.path.expanduser(target))
            )
            if not os.path.isdir(new_dir):
                self._logger.warning(f"Directory not found: {target} (from {current})")
                return ExecutionResult(
                    f"Directory not found: {target}",
                    ExecutionStatus.NAVIGATION_FAILED,
                )
            session.change_directory(new_dir)
            self._logger.info(f"Session '{session.session_id}' moved to {new_dir}")
            return ExecutionResult(f"Moved to {session.cwd}", ExecutionStatus.NAVIGATED)
