"""
Use case for executing a whitelisted command in a session directory.
"""

import logging
from typing import Iterable, Optional

from voice_terminal.entities.command_line import CommandLine
from voice_terminal.entities.execution_result import ExecutionResult, ExecutionStatus
from voice_terminal.exceptions import CommandExecutionError
from voice_terminal.ports.process.command_runner_port import CommandRunnerPort
from voice_terminal.use_cases.commands.rules import ALLOWED_COMMANDS

SUCCESS_MESSAGE = "Command executed successfully"


class ExecuteCommandUseCase:
    """Check a command against the whitelist, run it and fold its output into one message."""

    def __init__(
        self,
        runner: CommandRunnerPort,
        allowed_commands: Iterable[str] = ALLOWED_COMMANDS,
        whitelist_mode: str = "exact",
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            runner: Port used to spawn the child process
            allowed_commands: Program names that may be executed
            whitelist_mode: "exact" to require an exact program name, "prefix"
                to accept any program starting with an allowed name
            logger: Logger instance to use for logging
        """
        if whitelist_mode not in ("exact", "prefix"):
            raise ValueError(f"Unknown whitelist mode: {whitelist_mode}")
        self._runner = runner
        self._allowed = frozenset(allowed_commands)
        self._whitelist_mode = whitelist_mode
        self._logger = logger or logging.getLogger(__name__)

    def is_allowed(self, program: str) -> bool:
        if self._whitelist_mode == "prefix":
            return any(program.startswith(name) for name in self._allowed)
        return program in self._allowed

    def execute(self, command_line: CommandLine, cwd: str) -> ExecutionResult:
        """
        Run a command if its program is whitelisted.

        Args:
            command_line: Command to run
            cwd: Working directory for the child process

        Returns:
            ExecutionResult carrying exactly one of: the failure message, the
            error stream, or the standard output (success notice if empty)
        """
        program = command_line.program
        if not self.is_allowed(program):
            self._logger.warning(f"Blocked command: {command_line.render()}")
            return ExecutionResult(
                f"Unsafe or unknown command blocked: {program}",
                ExecutionStatus.BLOCKED,
            )

        try:
            outcome = self._runner.run(command_line, cwd)
        except CommandExecutionError as e:
            return ExecutionResult(str(e), ExecutionStatus.FAILED)

        if outcome.returncode != 0:
            message = f"Command failed: {command_line.render()}"
            if outcome.stderr:
                message = f"{message}\n{outcome.stderr}"
            self._logger.error(
                f"Command exited with code {outcome.returncode}: {command_line.render()}"
            )
            return ExecutionResult(message, ExecutionStatus.FAILED)
        if outcome.stderr:
            return ExecutionResult(outcome.stderr, ExecutionStatus.STDERR)
        self._logger.info(f"Output:\n{outcome.stdout}")
        return ExecutionResult(outcome.stdout or SUCCESS_MESSAGE, ExecutionStatus.SUCCESS)
