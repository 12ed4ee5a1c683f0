"""
Use case for translating a natural-language phrase into a command.
"""

import logging
from typing import Optional

from voice_terminal.entities.command_rule import CommandRule
from voice_terminal.entities.translation import (
    DirectoryChange,
    ShellCommand,
    Translation,
)
from voice_terminal.use_cases.commands.rules import (
    BACK_PATTERN,
    CD_PATTERN,
    COMMAND_RULES,
    unknown_command,
)

UNKNOWN_RULE = "unknown"


def normalize(phrase: str) -> str:
    """Lowercase a phrase for matching; typographic apostrophes become plain ones."""
    return phrase.strip().lower().replace("’", "'")


class PhraseTranslator:
    """Map a phrase to a directory change or to the command of the first matching rule."""

    def __init__(
        self,
        rules: tuple[CommandRule, ...] = COMMAND_RULES,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the translator.

        Args:
            rules: Ordered rule table, first match wins
            logger: Logger instance to use for logging
        """
        self._rules = tuple(rules)
        self._logger = logger or logging.getLogger(__name__)

    @property
    def rules(self) -> tuple[CommandRule, ...]:
        return self._rules

    def execute(self, phrase: str) -> Translation:
        """
        Translate a phrase.

        Args:
            phrase: Raw natural-language phrase

        Returns:
            DirectoryChange for navigation phrases, otherwise a ShellCommand
            (the unknown-command echo when nothing matches)
        """
        original = phrase.strip()
        lowered = normalize(original)

        cd = CD_PATTERN.match(original)
        if cd:
            return DirectoryChange(target=cd.group(1).strip())
        if BACK_PATTERN.search(lowered):
            return DirectoryChange(target="..", to_parent=True)

        for rule in self._rules:
            if rule.matches(lowered):
                command_line = rule.build(original)
                self._logger.info(
                    f"Phrase matched rule '{rule.name}': {command_line.render()}"
                )
                return ShellCommand(command_line=command_line, rule_name=rule.name)

        self._logger.info(f"No rule matched phrase: {original}")
        return ShellCommand(command_line=unknown_command(original), rule_name=UNKNOWN_RULE)
