"""
Command runner port interface defining the contract for child process execution.
"""

from abc import ABC, abstractmethod

from voice_terminal.entities.command_line import CommandLine
from voice_terminal.entities.execution_result import ProcessOutcome


class CommandRunnerPort(ABC):
    """Port interface for running a command as a child process."""

    @abstractmethod
    def run(self, command_line: CommandLine, cwd: str) -> ProcessOutcome:
        """
        Run a command to completion and capture its output.

        Args:
            command_line: Program and literal arguments to run
            cwd: Working directory for the child process

        Returns:
            ProcessOutcome with the exit code and captured streams

        Raises:
            CommandExecutionError: If the process cannot be spawned or times out
        """
        pass
