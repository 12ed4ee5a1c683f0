import logging
import threading
from collections import OrderedDict
from typing import Optional

from voice_terminal.entities.session import DEFAULT_SESSION_ID, SessionContext
from voice_terminal.exceptions import SessionError
from voice_terminal.ports.sessions.session_store_port import SessionStorePort


class InMemorySessionStore(SessionStorePort):
    """
    Session contexts kept in process memory for the life of the server.

    At most `max_sessions` contexts are held. When a new session would exceed
    the limit the least recently used one is evicted; the default session is
    never evicted.
    """

    def __init__(
        self,
        start_directory: str,
        logger: Optional[logging.Logger] = None,
        max_sessions: int = 1000,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._start_directory = start_directory
        self._max_sessions = max_sessions
        self._sessions: "OrderedDict[str, SessionContext]" = OrderedDict()
        self._lock = threading.Lock()
        self._logger = logger or logging.getLogger(__name__)

    def get(self, session_id: str) -> SessionContext:
        session_id = (session_id or "").strip()
        if not session_id:
            raise SessionError("Session id must be a non-empty string")
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                self._sessions.move_to_end(session_id)
                return session
            session = SessionContext(session_id, self._start_directory)
            self._sessions[session_id] = session
            self._logger.info(
                f"Created session '{session_id}' in {self._start_directory}"
            )
            self._evict(keep=session_id)
            return session

    def _evict(self, keep: str) -> None:
        """Drop least recently used sessions until the store is within its limit."""
        while len(self._sessions) > self._max_sessions:
            victim = next(
                (
                    sid
                    for sid in self._sessions
                    if sid != DEFAULT_SESSION_ID and sid != keep
                ),
                None,
            )
            if victim is None:
                return
            del self._sessions[victim]
            self._logger.info(f"Evicted idle session '{victim}'")

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
