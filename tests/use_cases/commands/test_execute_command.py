"""
Tests for the ExecuteCommandUseCase.
"""

import pytest

from voice_terminal.entities.command_line import CommandLine
from voice_terminal.entities.execution_result import ExecutionStatus, ProcessOutcome
from voice_terminal.exceptions import CommandExecutionError
from voice_terminal.use_cases.commands.execute_command import (
    SUCCESS_MESSAGE,
    ExecuteCommandUseCase,
)


class TestWhitelist:
    """Test cases for the command whitelist."""

    @pytest.mark.parametrize(
        "program", ["bash", "sh", "python", "curl", "rmsomething", "lsof", "sudo"]
    )
    def test_exact_mode_blocks_without_spawning(self, mock_runner, mock_logger, program):
        use_case = ExecuteCommandUseCase(mock_runner, logger=mock_logger)
        result = use_case.execute(CommandLine(program, ("-c", "id")), "/tmp")

        assert result.status == ExecutionStatus.BLOCKED
        assert result.output == f"Unsafe or unknown command blocked: {program}"
        mock_runner.run.assert_not_called()
        mock_logger.warning.assert_called_once()

    def test_prefix_mode_accepts_shared_prefix(self, mock_runner):
        use_case = ExecuteCommandUseCase(mock_runner, whitelist_mode="prefix")
        cmd = CommandLine("rmsomething")

        assert use_case.is_allowed("rmsomething") is True
        use_case.execute(cmd, "/tmp")
        mock_runner.run.assert_called_once_with(cmd, "/tmp")

    def test_prefix_mode_still_blocks_unrelated(self, mock_runner):
        use_case = ExecuteCommandUseCase(mock_runner, whitelist_mode="prefix")
        result = use_case.execute(CommandLine("bash"), "/tmp")
        assert result.status == ExecutionStatus.BLOCKED
        mock_runner.run.assert_not_called()

    def test_custom_allowed_commands(self, mock_runner):
        use_case = ExecuteCommandUseCase(mock_runner, allowed_commands=["echo"])
        assert use_case.is_allowed("echo") is True
        assert use_case.is_allowed("ls") is False

    def test_invalid_mode(self, mock_runner):
        with pytest.raises(ValueError, match="Unknown whitelist mode"):
            ExecuteCommandUseCase(mock_runner, whitelist_mode="fuzzy")


class TestOutcomes:
    """Exactly one output channel is surfaced per call."""

    def test_stdout(self, mock_runner):
        mock_runner.run.return_value = ProcessOutcome(0, "a.txt\nb.txt\n", "")
        cmd = CommandLine("ls")
        result = ExecuteCommandUseCase(mock_runner).execute(cmd, "/work")

        assert result.status == ExecutionStatus.SUCCESS
        assert result.output == "a.txt\nb.txt\n"
        mock_runner.run.assert_called_once_with(cmd, "/work")

    def test_empty_stdout_reports_success(self, mock_runner):
        result = ExecuteCommandUseCase(mock_runner).execute(
            CommandLine("touch", ("x",)), "/work"
        )
        assert result.status == ExecutionStatus.SUCCESS
        assert result.output == SUCCESS_MESSAGE

    def test_stderr_takes_precedence_over_stdout(self, mock_runner):
        mock_runner.run.return_value = ProcessOutcome(0, "out", "warning: careful")
        result = ExecuteCommandUseCase(mock_runner).execute(CommandLine("ls"), "/work")
        assert result.status == ExecutionStatus.STDERR
        assert result.output == "warning: careful"

    def test_non_zero_exit(self, mock_runner, mock_logger):
        mock_runner.run.return_value = ProcessOutcome(
            1, "", "cat: 'no such.txt': No such file or directory\n"
        )
        cmd = CommandLine("cat", ("no such.txt",))
        result = ExecuteCommandUseCase(mock_runner, logger=mock_logger).execute(
            cmd, "/work"
        )

        assert result.status == ExecutionStatus.FAILED
        assert result.output == (
            "Command failed: cat 'no such.txt'\n"
            "cat: 'no such.txt': No such file or directory\n"
        )
        mock_logger.error.assert_called_once_with(
            "Command exited with code 1: cat 'no such.txt'"
        )

    def test_non_zero_exit_without_stderr(self, mock_runner):
        mock_runner.run.return_value = ProcessOutcome(2, "partial", "")
        result = ExecuteCommandUseCase(mock_runner).execute(CommandLine("ls"), "/work")
        assert result.status == ExecutionStatus.FAILED
        assert result.output == "Command failed: ls"

    def test_runner_error(self, mock_runner):
        mock_runner.run.side_effect = CommandExecutionError("Failed to run ls: boom")
        result = ExecuteCommandUseCase(mock_runner).execute(CommandLine("ls"), "/work")
        assert result.status == ExecutionStatus.FAILED
        assert result.output == "Failed to run ls: boom"
