import logging
import subprocess
import threading
from typing import Optional

from voice_terminal.entities.command_line import CommandLine
from voice_terminal.entities.execution_result import ProcessOutcome
from voice_terminal.exceptions import CommandExecutionError
from voice_terminal.ports.process.command_runner_port import CommandRunnerPort


class SubprocessCommandRunner(CommandRunnerPort):
    """Run commands with subprocess, bounded by a process semaphore.

    By default the argument vector is executed directly (no shell). With
    ``use_shell`` the shlex-quoted line is handed to ``shell -c``, which parses
    back to the same literal tokens.
    """

    def __init__(
        self,
        max_processes: int = 4,
        timeout: Optional[float] = None,
        use_shell: bool = False,
        shell: str = "/bin/bash",
        logger: Optional[logging.Logger] = None,
    ) -> None:
        if max_processes < 1:
            raise ValueError("max_processes must be >= 1")
        self._slots = threading.BoundedSemaphore(max_processes)
        self._timeout = timeout
        self._use_shell = use_shell
        self._shell = shell
        self._logger = logger or logging.getLogger(__name__)

    def _build_argv(self, command_line: CommandLine) -> list[str]:
        if self._use_shell:
            return [self._shell, "-c", command_line.render()]
        return command_line.argv

    def run(self, command_line: CommandLine, cwd: str) -> ProcessOutcome:
        argv = self._build_argv(command_line)
        with self._slots:
            try:
                self._logger.info(f"Running {command_line.render()} in {cwd}")
                p = subprocess.run(
                    argv,
                    cwd=cwd,
                    stdin=subprocess.DEVNULL,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE,
                    text=True,
                    errors="replace",
                    timeout=self._timeout,
                    shell=False,
                )
            except subprocess.TimeoutExpired:
                self._logger.error(
                    f"Command timed out after {self._timeout}s: {command_line.render()}"
                )
                raise CommandExecutionError(
                    f"Command timed out after {self._timeout}s: {command_line.render()}"
                )
            except OSError as e:
                self._logger.error(f"Failed to spawn {command_line.program}: {e}")
                raise CommandExecutionError(
                    f"Failed to run {command_line.program}: {e}"
                )
        return ProcessOutcome(
            returncode=p.returncode, stdout=p.stdout or "", stderr=p.stderr or ""
        )
