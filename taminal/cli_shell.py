from __future__ import annotations

import argparse
import os
import sys
from typing import Iterable, Optional, TextIO

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from taminal.config.logging_config import configure_logging
from taminal.config.settings import settings
from taminal.container import container
from taminal.entities.output import OutputLine, Stream
from taminal.entities.profile import ShellProfile


def _write_lines(lines: Iterable[OutputLine], console: Console, err_console: Console) -> None:
    for line in lines:
        if line.stream is Stream.CONTROL:
            console.file.write(line.text)
            console.file.flush()
        elif line.stream is Stream.STDERR:
            err_console.print(Text(line.text, style="red"), soft_wrap=True)
        else:
            console.print(Text(line.text), soft_wrap=True)


def _print_banner(console: Console) -> None:
    console.print(
        Panel(
            "Simple Terminal - Type 'exit' or 'quit' to exit\n"
            "Tip: Type 'help' to see available commands",
            title="Taminal",
            border_style="cyan",
            box=box.ROUNDED,
        )
    )


def interactive_main(
    argv: Optional[list[str]] = None,
    stdin: Optional[TextIO] = None,
    console: Optional[Console] = None,
    err_console: Optional[Console] = None,
) -> int:
    parser = argparse.ArgumentParser(
        prog="taminal",
        description="Minimal interactive shell (terminal).",
    )
    parser.add_argument(
        "--cwd",
        default=None,
        help="Start in this directory (default: current)",
    )
    parser.add_argument(
        "--no-banner",
        dest="banner",
        action="store_false",
        help="Do not print the startup banner",
    )
    parser.set_defaults(banner=settings.show_banner)
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Diagnostics level, written to stderr (default: WARNING)",
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    stdin = stdin or sys.stdin
    console = console or Console(highlight=False, soft_wrap=True)
    err_console = err_console or Console(stderr=True, highlight=False, soft_wrap=True)

    # Optional cwd change
    if args.cwd:
        try:
            os.chdir(args.cwd)
        except OSError as e:
            err_console.print(f"Failed to chdir to {args.cwd}: {e}", markup=False)

    dispatcher = container.get_dispatcher(ShellProfile.cli())
    session = dispatcher.new_session()

    if args.banner:
        _print_banner(console)

    while True:
        try:
            console.print(Text(f"{session.directory_name}> "), end="")
            console.file.flush()
            line = stdin.readline()
        except KeyboardInterrupt:
            console.print()
            break

        # zero bytes read: end of input
        if not line:
            console.print()
            console.print(settings.farewell, markup=False)
            break

        try:
            lines = dispatcher.process_line(line, session)
        except KeyboardInterrupt:
            console.print()
            continue

        _write_lines(lines, console, err_console)

        if session.exit_requested:
            console.print(settings.farewell, markup=False)
            break

    return 0


def main(argv: Optional[list[str]] = None) -> int:  # pragma: no cover
    return interactive_main(argv)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
