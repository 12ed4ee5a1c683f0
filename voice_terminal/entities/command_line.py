"""
Command line domain entity.
"""

import shlex
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CommandLine:
    """
    A program name plus its literal arguments.

    Arguments are kept as separate tokens and are never re-split or
    interpolated, so whitespace and shell metacharacters inside an argument
    stay part of that one argument.
    """

    program: str
    args: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.program or not isinstance(self.program, str):
            raise ValueError("Program must be a non-empty string")
        # accept lists from callers while keeping the entity hashable
        object.__setattr__(self, "args", tuple(str(a) for a in self.args))

    @property
    def argv(self) -> list[str]:
        """Argument vector suitable for subprocess execution."""
        return [self.program, *self.args]

    def render(self) -> str:
        """
        Render the command as a single shell-safe line.

        Returns:
            The command with every token quoted by shlex
        """
        return shlex.join(self.argv)

    def __str__(self) -> str:
        return self.render()
