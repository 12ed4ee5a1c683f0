"""
Translation outcomes produced by the phrase translator.
"""

from dataclasses import dataclass
from typing import Union

from voice_terminal.entities.command_line import CommandLine


@dataclass(frozen=True)
class DirectoryChange:
    """Request to move the session to another directory without spawning a process."""

    target: str
    to_parent: bool = False


@dataclass(frozen=True)
class ShellCommand:
    """A concrete command selected by a rule (or the unknown-command fallback)."""

    command_line: CommandLine
    rule_name: str


Translation = Union[DirectoryChange, ShellCommand]
