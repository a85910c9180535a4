"""
Command line domain entities.
"""

from dataclasses import dataclass, field

from taminal.exceptions import InvalidOptionError

COMPLETION_TRIGGER = "\t"


@dataclass(frozen=True)
class Command:
    """A command name and its arguments, parsed fresh from one input line."""

    name: str
    arguments: list[str] = field(default_factory=list)

    @classmethod
    def parse(cls, line: str) -> "Command | None":
        """
        Split a raw input line on whitespace (no quoting support).

        A tab at the very end of the line is the completion trigger: it is kept
        on the last argument instead of being treated as a separator. When it
        follows the command name or other whitespace it becomes an argument of
        its own (an empty partial path).

        Args:
            line: Raw input line, possibly ending with a newline

        Returns:
            The parsed Command, or None for a blank line
        """
        raw = line.rstrip("\r\n")
        tokens = raw.split()
        if not tokens:
            return None
        if raw.endswith(COMPLETION_TRIGGER):
            if len(tokens) == 1 or raw[-2:-1].isspace():
                tokens.append(COMPLETION_TRIGGER)
            else:
                tokens[-1] += COMPLETION_TRIGGER
        return cls(tokens[0], tokens[1:])

    @property
    def tokens(self) -> list[str]:
        return [self.name, *self.arguments]

    @property
    def completion_requested(self) -> bool:
        return bool(self.arguments) and self.arguments[-1].endswith(COMPLETION_TRIGGER)

    def without_trigger(self) -> "Command":
        """Same command with the completion trigger dropped from its arguments."""
        if not self.completion_requested:
            return self
        arguments = [arg.rstrip(COMPLETION_TRIGGER) for arg in self.arguments]
        return Command(self.name, [arg for arg in arguments if arg])

    def __str__(self) -> str:
        return " ".join(self.tokens)


@dataclass(frozen=True)
class RemoveOptions:
    """Flags and targets of an ``rm`` invocation."""

    force: bool = False
    recursive: bool = False
    targets: list[str] = field(default_factory=list)

    @classmethod
    def parse(cls, arguments: list[str], strict: bool = True) -> "RemoveOptions":
        """
        Scan arguments for flag clusters; order relative to targets does not matter.

        Args:
            arguments: Arguments following ``rm``
            strict: Reject unknown flag characters instead of ignoring them

        Raises:
            InvalidOptionError: On an unknown flag character when strict
        """
        force = False
        recursive = False
        targets: list[str] = []
        for arg in arguments:
            if not arg.startswith("-"):
                targets.append(arg)
                continue
            for ch in arg[1:]:
                if ch == "f":
                    force = True
                elif ch in ("r", "R"):
                    recursive = True
                elif strict:
                    raise InvalidOptionError(ch)
        return cls(force=force, recursive=recursive, targets=targets)
