"""
Session store port interface defining the contract for session contexts.
"""

from abc import ABC, abstractmethod

from voice_terminal.entities.session import SessionContext


class SessionStorePort(ABC):
    """Port interface for looking up per-caller session contexts."""

    @abstractmethod
    def get(self, session_id: str) -> SessionContext:
        """
        Get the context for a session, creating it on first use.

        Args:
            session_id: Identifier of the caller session

        Returns:
            The SessionContext for that id

        Raises:
            SessionError: If the id is invalid
        """
        pass
