"""
Command rule domain entity.
"""

import re
from dataclasses import dataclass
from typing import Callable

from voice_terminal.entities.command_line import CommandLine

CONTENT = "content"
SYSTEM = "system"


@dataclass(frozen=True)
class CommandRule:
    """
    One entry of the phrase dispatch table.

    Attributes:
        name: Stable identifier of the rule
        category: CONTENT or SYSTEM, used to keep priority groups explicit
        pattern: Regex tested against the lowercased phrase
        build: Builds the command from the original (case-preserved) phrase
    """

    name: str
    category: str
    pattern: re.Pattern
    build: Callable[[str], CommandLine]

    def matches(self, lowered: str) -> bool:
        return self.pattern.search(lowered) is not None

    def __repr__(self) -> str:
        return f"CommandRule(name='{self.name}', category='{self.category}')"
