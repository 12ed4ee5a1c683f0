"""
Session context entity holding the tracked working directory.
"""

import os
import threading

DEFAULT_SESSION_ID = "default"


class SessionContext:
    """
    Working-directory state for one caller session.

    The lock serialises navigation so that reading the current directory and
    replacing it happen as one step.
    """

    def __init__(self, session_id: str, cwd: str):
        if not session_id:
            raise ValueError("Session id must be a non-empty string")
        self.session_id = session_id
        self._cwd = os.path.abspath(cwd)
        self.lock = threading.RLock()

    @property
    def cwd(self) -> str:
        return self._cwd

    def change_directory(self, path: str) -> None:
        """Replace the current directory with an absolute path."""
        with self.lock:
            self._cwd = os.path.abspath(path)

    def __repr__(self) -> str:
        return f"SessionContext(session_id='{self.session_id}', cwd='{self._cwd}')"
