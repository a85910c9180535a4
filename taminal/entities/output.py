from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from taminal.exceptions import ShellError

ERROR_PREFIX = "[ERROR] "


class Stream(str, Enum):
    STDOUT = "stdout"
    STDERR = "stderr"
    # raw terminal escape sequences, written without a newline
    CONTROL = "control"


@dataclass(frozen=True)
class OutputLine:
    """A single display line produced by a command."""

    text: str
    stream: Stream = Stream.STDOUT

    @property
    def is_error(self) -> bool:
        return self.stream is Stream.STDERR


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of running an external command."""

    command: str
    returncode: int
    stdout_lines: list[str] = field(default_factory=list)
    stderr_lines: list[str] = field(default_factory=list)
    captured: bool = False

    def output_lines(self) -> list[OutputLine]:
        """Captured output as display lines, stderr lines marked with the error prefix."""
        lines = [OutputLine(text) for text in self.stdout_lines]
        lines.extend(
            OutputLine(ERROR_PREFIX + text, Stream.STDERR) for text in self.stderr_lines
        )
        return lines


@dataclass(frozen=True)
class TargetResult:
    """Outcome for one operand of a multi-target command (mkdir, rmdir, rm)."""

    target: str
    error: Optional[ShellError] = None

    @property
    def ok(self) -> bool:
        return self.error is None
