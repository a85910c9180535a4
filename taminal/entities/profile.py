"""
Front end profiles: the policy switches that distinguish the terminal shell
from the windowed one while both share the same dispatcher.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from taminal.entities.output import OutputLine, Stream

CLEAR_SCREEN_SEQUENCE = "\x1b[2J\x1b[1;1H"
CLEARED_BANNER = "=== Terminal Cleared ==="


class DirectoryTrackingMode(str, Enum):
    # the process working directory is the source of truth (os.chdir)
    OS_MANAGED = "os_managed"
    # the session owns a canonicalized path and never touches the process cwd
    OWNED_CANONICALIZED = "owned_canonicalized"


class ExecutionMode(str, Enum):
    INTERACTIVE = "interactive"
    CAPTURED = "captured"


CLI_HELP_LINES = [
    "=== Simple Terminal - Available Commands ===",
    "",
    "File and Directory Operations:",
    "  ls [dir]      - List directory contents",
    "  cd [dir]      - Change directory",
    "  pwd           - Print working directory",
    "  mkdir <dir>   - Create directory",
    "  rmdir <dir>   - Remove empty directory",
    "  rm <file>     - Remove file",
    "    -f          - Force removal (ignore errors)",
    "    -r, -R      - Remove directories and their contents recursively",
    "",
    "Terminal Control:",
    "  clear         - Clear screen",
    "  help          - Show this help message",
    "  exit/quit     - Exit the terminal",
    "",
    "Other Commands:",
    "  [command]     - Execute as external command",
    "",
    "Completion:",
    "  cd <partial><Tab>  - Complete a path (line must end with a tab)",
    "",
    "Shortcuts:",
    "  Ctrl+C        - Interrupt running command",
    "  Ctrl+D        - Exit on empty line",
    "",
    "Examples:",
    "  rm file.txt           - Remove a file",
    "  rm -rf directory/     - Remove a directory and all its contents",
    "  mkdir new_folder      - Create a new directory",
    "  rmdir old_folder      - Remove an empty directory",
]

GUI_HELP_LINES = [
    "=== Available Commands ===",
    "",
    "File and Directory Operations:",
    "  ls [dir]      - List directory contents",
    "  cd [dir]      - Change directory",
    "  pwd           - Print working directory",
    "  mkdir <dir>   - Create directory",
    "  rmdir <dir>   - Remove empty directory",
    "  rm <file>     - Remove file",
    "    -f          - Force removal",
    "    -r          - Remove directories recursively",
    "",
    "Terminal Control:",
    "  clear         - Clear terminal",
    "  help          - Show this help",
    "  exit/quit     - (Use window close button)",
    "",
    "Shortcuts:",
    "  Up/Down       - Navigate command history",
    "  Tab           - Complete the cd argument",
    "  Ctrl+L        - Clear terminal",
    "  Enter         - Execute command",
]


@dataclass(frozen=True)
class ShellProfile:
    """Behaviour of one front end."""

    name: str
    directory_tracking: DirectoryTrackingMode
    execution_mode: ExecutionMode
    strict_options: bool
    announce_changes: bool
    output_limit: Optional[int]
    clear_line: OutputLine
    exit_message: Optional[str] = None
    usage_hints: bool = False
    help_lines: list[str] = field(default_factory=list)

    @property
    def owns_directory(self) -> bool:
        return self.directory_tracking is DirectoryTrackingMode.OWNED_CANONICALIZED

    @classmethod
    def cli(cls) -> "ShellProfile":
        return cls(
            name="cli",
            directory_tracking=DirectoryTrackingMode.OS_MANAGED,
            execution_mode=ExecutionMode.INTERACTIVE,
            strict_options=True,
            announce_changes=False,
            output_limit=None,
            clear_line=OutputLine(CLEAR_SCREEN_SEQUENCE, Stream.CONTROL),
            usage_hints=True,
            help_lines=list(CLI_HELP_LINES),
        )

    @classmethod
    def gui(cls, output_limit: int = 1000) -> "ShellProfile":
        return cls(
            name="gui",
            directory_tracking=DirectoryTrackingMode.OWNED_CANONICALIZED,
            execution_mode=ExecutionMode.CAPTURED,
            strict_options=False,
            announce_changes=True,
            output_limit=output_limit,
            clear_line=OutputLine(CLEARED_BANNER),
            exit_message="Use the window close button to exit",
            help_lines=list(GUI_HELP_LINES),
        )
