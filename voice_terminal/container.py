"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from voice_terminal.adapters.process.subprocess_runner import SubprocessCommandRunner
from voice_terminal.adapters.sessions.in_memory_session_store import (
    InMemorySessionStore,
)
from voice_terminal.config.settings import Settings
from voice_terminal.ports.process.command_runner_port import CommandRunnerPort
from voice_terminal.ports.sessions.session_store_port import SessionStorePort
from voice_terminal.use_cases.commands.execute_command import ExecuteCommandUseCase
from voice_terminal.use_cases.commands.handle_phrase import HandlePhraseUseCase
from voice_terminal.use_cases.commands.navigate_directory import (
    NavigateDirectoryUseCase,
)
from voice_terminal.use_cases.commands.translate_phrase import PhraseTranslator


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            from voice_terminal.config.settings import settings

            self._settings = settings
        return self._settings

    def get_session_store(self) -> SessionStorePort:
        """
        Get session store instance.

        Returns:
            SessionStorePort implementation
        """
        if "session_store" not in self._instances:
            self._instances["session_store"] = InMemorySessionStore(
                self.settings.start_directory,
                self._logger,
                max_sessions=self.settings.max_sessions,
            )
        return self._instances["session_store"]

    def get_command_runner(self) -> CommandRunnerPort:
        """
        Get command runner adapter instance.

        Returns:
            CommandRunnerPort implementation
        """
        if "command_runner" not in self._instances:
            s = self.settings
            self._instances["command_runner"] = SubprocessCommandRunner(
                max_processes=s.max_processes,
                timeout=s.timeout,
                use_shell=s.use_shell,
                shell=s.shell,
                logger=self._logger,
            )
        return self._instances["command_runner"]

    def get_phrase_translator(self) -> PhraseTranslator:
        if "phrase_translator" not in self._instances:
            self._instances["phrase_translator"] = PhraseTranslator(logger=self._logger)
        return self._instances["phrase_translator"]

    def get_navigate_directory_use_case(self) -> NavigateDirectoryUseCase:
        if "navigate_directory_use_case" not in self._instances:
            self._instances["navigate_directory_use_case"] = NavigateDirectoryUseCase(
                self._logger
            )
        return self._instances["navigate_directory_use_case"]

    def get_execute_command_use_case(self) -> ExecuteCommandUseCase:
        """
        Get execute command use case with injected dependencies.

        Returns:
            Configured ExecuteCommandUseCase
        """
        if "execute_command_use_case" not in self._instances:
            self._instances["execute_command_use_case"] = ExecuteCommandUseCase(
                self.get_command_runner(),
                whitelist_mode=self.settings.whitelist_mode,
                logger=self._logger,
            )
        return self._instances["execute_command_use_case"]

    def get_handle_phrase_use_case(self) -> HandlePhraseUseCase:
        """
        Get handle phrase use case with injected dependencies.

        Returns:
            Configured HandlePhraseUseCase
        """
        if "handle_phrase_use_case" not in self._instances:
            self._instances["handle_phrase_use_case"] = HandlePhraseUseCase(
                self.get_session_store(),
                self.get_phrase_translator(),
                self.get_navigate_directory_use_case(),
                self.get_execute_command_use_case(),
                logger=self._logger,
            )
        return self._instances["handle_phrase_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
