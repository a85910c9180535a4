"""
Session domain entity.
"""

import os
from collections import deque
from typing import Iterable, Optional

from taminal.entities.output import OutputLine, Stream


class Session:
    """
    Mutable state persisting across command invocations within one run:
    current directory, command history and the output buffer.
    """

    def __init__(
        self,
        current_directory: Optional[str] = None,
        output_limit: Optional[int] = None,
        seed: Iterable[str] = (),
    ):
        """
        Initialize the session.

        Args:
            current_directory: Absolute starting directory (defaults to the process cwd)
            output_limit: Keep only the most recent lines; None means unbounded
            seed: Lines placed in the output buffer at startup
        """
        self.current_directory: str = current_directory or _initial_directory()
        self.history: list[str] = []
        self.history_cursor: int = 0
        self.output: deque[OutputLine] = deque(maxlen=output_limit)
        self.exit_requested: bool = False
        for text in seed:
            self.emit(text)

    @property
    def directory_name(self) -> str:
        """Last segment of the current directory, as shown in the prompt."""
        name = os.path.basename(self.current_directory.rstrip(os.sep))
        if name:
            return name
        return self.current_directory or "?"

    # History
    def record(self, line: str) -> None:
        self.history.append(line)
        self.history_cursor = len(self.history)

    def history_previous(self) -> Optional[str]:
        """Step back in history; None when already at the oldest entry."""
        if self.history_cursor == 0:
            return None
        self.history_cursor -= 1
        return self.history[self.history_cursor]

    def history_next(self) -> str:
        """Step forward in history; an empty string past the most recent entry."""
        if self.history_cursor < len(self.history):
            self.history_cursor += 1
        if self.history_cursor == len(self.history):
            return ""
        return self.history[self.history_cursor]

    # Output
    def emit(self, text: str, stream: Stream = Stream.STDOUT) -> OutputLine:
        line = OutputLine(text, stream)
        self.output.append(line)
        return line

    def append(self, line: OutputLine) -> None:
        self.output.append(line)

    def clear_output(self, seed: Optional[OutputLine] = None) -> None:
        self.output.clear()
        if seed is not None:
            self.output.append(seed)

    def output_text(self) -> list[str]:
        return [line.text for line in self.output]


def _initial_directory() -> str:
    try:
        return os.getcwd()
    except OSError:
        return os.sep
