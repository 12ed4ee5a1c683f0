"""
Use case handling one inbound phrase end to end.
"""

import logging
from typing import Optional

from voice_terminal.entities.execution_result import ExecutionResult
from voice_terminal.entities.session import DEFAULT_SESSION_ID
from voice_terminal.entities.translation import DirectoryChange
from voice_terminal.exceptions import BaseAppError, CommandExecutionError
from voice_terminal.ports.sessions.session_store_port import SessionStorePort
from voice_terminal.use_cases.commands.execute_command import ExecuteCommandUseCase
from voice_terminal.use_cases.commands.navigate_directory import (
    NavigateDirectoryUseCase,
)
from voice_terminal.use_cases.commands.translate_phrase import PhraseTranslator


class HandlePhraseUseCase:
    """Translate a phrase, then navigate or execute within the caller's session."""

    def __init__(
        self,
        sessions: SessionStorePort,
        translator: PhraseTranslator,
        navigator: NavigateDirectoryUseCase,
        executor: ExecuteCommandUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        self._sessions = sessions
        self._translator = translator
        self._navigator = navigator
        self._executor = executor
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self, phrase: str, session_id: str = DEFAULT_SESSION_ID
    ) -> ExecutionResult:
        """
        Handle a phrase for a session.

        Args:
            phrase: Natural-language phrase, must be non-empty
            session_id: Caller session whose working directory is used

        Returns:
            ExecutionResult for the phrase

        Raises:
            CommandExecutionError: If handling fails unexpectedly
        """
        try:
            self._logger.info(f"Voice command [{session_id}]: {phrase}")
            session = self._sessions.get(session_id)
            translation = self._translator.execute(phrase)
            if isinstance(translation, DirectoryChange):
                return self._navigator.execute(session, translation)
            return self._executor.execute(translation.command_line, session.cwd)
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error handling phrase: {e}")
            raise CommandExecutionError(f"Failed to handle '{phrase}': {str(e)}")
