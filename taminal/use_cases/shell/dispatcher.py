"""
Command dispatch shared by the terminal and the windowed front ends.
"""

import logging
from typing import Callable, Iterable, Optional

from taminal.entities.command import COMPLETION_TRIGGER, Command, RemoveOptions
from taminal.entities.output import OutputLine, Stream, TargetResult
from taminal.entities.profile import ShellProfile
from taminal.entities.session import Session
from taminal.exceptions import CommandNotFoundError, MissingOperandError, ShellError
from taminal.ports.files.file_system_port import FileSystemPort
from taminal.use_cases.files.list_directory import ListDirectoryUseCase, format_columns
from taminal.use_cases.files.make_directories import MakeDirectoriesUseCase
from taminal.use_cases.files.remove_directories import RemoveDirectoriesUseCase
from taminal.use_cases.files.remove_files import RemoveFilesUseCase
from taminal.use_cases.navigation.change_directory import ChangeDirectoryUseCase
from taminal.use_cases.paths.resolve_path import PathResolver
from taminal.use_cases.process.run_external import RunExternalCommandUseCase

Handler = Callable[[Command, Session], list[OutputLine]]


def _out(text: str) -> OutputLine:
    return OutputLine(text)


def _err(text: str) -> OutputLine:
    return OutputLine(text, Stream.STDERR)


class BuiltinDispatcher:
    """
    Map one input line to a built-in or an external command.

    The dispatch table is keyed by exact, case-sensitive command name. Every
    error is reported as output lines: nothing raised by a command escapes
    ``process_line``.
    """

    def __init__(
        self,
        profile: ShellProfile,
        file_system: FileSystemPort,
        change_directory: ChangeDirectoryUseCase,
        list_directory: ListDirectoryUseCase,
        make_directories: MakeDirectoriesUseCase,
        remove_directories: RemoveDirectoriesUseCase,
        remove_files: RemoveFilesUseCase,
        run_external: RunExternalCommandUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        self.profile = profile
        self._file_system = file_system
        self._change_directory = change_directory
        self._list_directory = list_directory
        self._make_directories = make_directories
        self._remove_directories = remove_directories
        self._remove_files = remove_files
        self._run_external = run_external
        self._logger = logger or logging.getLogger(__name__)
        self._builtins: dict[str, Handler] = {
            "cd": self._cd,
            "pwd": self._pwd,
            "ls": self._ls,
            "mkdir": self._mkdir,
            "rmdir": self._rmdir,
            "rm": self._rm,
            "clear": self._clear,
            "help": self._help,
            "exit": self._exit,
            "quit": self._exit,
        }

    def new_session(
        self, current_directory: Optional[str] = None, seed: Iterable[str] = ()
    ) -> Session:
        """Create a session shaped for this dispatcher's front end."""
        if current_directory is None and not self.profile.owns_directory:
            current_directory = self._file_system.working_directory()
        return Session(current_directory, self.profile.output_limit, seed)

    def process_line(self, line: str, session: Session) -> list[OutputLine]:
        """
        Execute one input line.

        Args:
            line: Raw input line
            session: Session the command runs in

        Returns:
            The lines produced by this command, in order. They are also
            appended to the session output buffer.
        """
        command = Command.parse(line)
        if command is None:
            # history browsing starts over after every submitted line
            session.history_cursor = len(session.history)
            return []
        session.record(line.rstrip("\r\n"))
        if not self.profile.owns_directory:
            self._sync_directory(session)
        if command.name != "cd":
            command = command.without_trigger()

        handler = self._builtins.get(command.name, self._external)
        self._logger.debug(f"[{self.profile.name}] {command}")
        try:
            lines = handler(command, session)
        except MissingOperandError as e:
            lines = [_err(f"{command.name}: {e.reason}")]
            if self.profile.usage_hints:
                lines.append(_err(f"Try '{command.name} --help' for more information."))
        except ShellError as e:
            lines = [_err(f"{command.name}: {e.reason}")]
        except Exception as e:
            self._logger.exception(f"Unexpected failure in {command.name}")
            lines = [_err(f"{command.name}: {e}")]

        for output_line in lines:
            session.append(output_line)
        return lines

    def _sync_directory(self, session: Session) -> None:
        try:
            session.current_directory = self._file_system.working_directory()
        except ShellError as e:
            self._logger.warning(f"Working directory is unavailable: {e}")

    def _report(
        self,
        results: list[TargetResult],
        failure: str,
        success: Optional[str] = None,
    ) -> list[OutputLine]:
        lines: list[OutputLine] = []
        for result in results:
            if result.error is not None:
                lines.append(_err(failure.format(target=result.target, reason=result.error.reason)))
            elif success and self.profile.announce_changes:
                lines.append(_out(success.format(target=result.target)))
        return lines

    # Built-ins
    def _cd(self, command: Command, session: Session) -> list[OutputLine]:
        if command.arguments and command.arguments[0].endswith(COMPLETION_TRIGGER):
            return self._complete_cd(command.arguments[0].rstrip(COMPLETION_TRIGGER), session)
        target = command.arguments[0] if command.arguments else PathResolver.default_target()
        return self._change_to(target, session)

    def _complete_cd(self, partial: str, session: Session) -> list[OutputLine]:
        candidates = self._change_directory.complete(partial, session)
        if len(candidates) == 1:
            return self._change_to(candidates[0], session)
        if not candidates:
            return []
        return [_out("Possible completions:")] + [_out(f"  {c}") for c in candidates]

    def _change_to(self, target: str, session: Session) -> list[OutputLine]:
        try:
            directory = self._change_directory.execute(
                target, session, self.profile.directory_tracking
            )
        except ShellError as e:
            return [_err(f"cd: {target}: {e.reason}")]
        if self.profile.announce_changes:
            return [_out(f"Changed to: {directory}")]
        return []

    def _pwd(self, command: Command, session: Session) -> list[OutputLine]:
        return [_out(session.current_directory)]

    def _ls(self, command: Command, session: Session) -> list[OutputLine]:
        directory = command.arguments[0] if command.arguments else "."
        try:
            names = self._list_directory.execute(directory, session.current_directory)
        except ShellError as e:
            return [_err(f"ls: {directory}: {e.reason}")]
        return [_out(row) for row in format_columns(names)]

    def _mkdir(self, command: Command, session: Session) -> list[OutputLine]:
        results = self._make_directories.execute(command.arguments, session.current_directory)
        return self._report(
            results,
            "mkdir: cannot create directory '{target}': {reason}",
            "Created directory: {target}",
        )

    def _rmdir(self, command: Command, session: Session) -> list[OutputLine]:
        results = self._remove_directories.execute(command.arguments, session.current_directory)
        return self._report(
            results,
            "rmdir: failed to remove '{target}': {reason}",
            "Removed directory: {target}",
        )

    def _rm(self, command: Command, session: Session) -> list[OutputLine]:
        # option errors abort before anything is removed
        options = RemoveOptions.parse(command.arguments, strict=self.profile.strict_options)
        results = self._remove_files.execute(options, session.current_directory)
        return self._report(results, "rm: cannot remove '{target}': {reason}")

    def _clear(self, command: Command, session: Session) -> list[OutputLine]:
        session.clear_output()
        return [self.profile.clear_line]

    def _help(self, command: Command, session: Session) -> list[OutputLine]:
        return [_out(text) for text in self.profile.help_lines]

    def _exit(self, command: Command, session: Session) -> list[OutputLine]:
        if self.profile.exit_message:
            return [_out(self.profile.exit_message)]
        session.exit_requested = True
        return []

    def _external(self, command: Command, session: Session) -> list[OutputLine]:
        try:
            outcome = self._run_external.execute(
                command.name,
                command.arguments,
                session.current_directory,
                self.profile.execution_mode,
            )
        except CommandNotFoundError as e:
            return [_err(str(e))]
        if outcome.captured:
            return outcome.output_lines()
        if outcome.returncode > 0:
            return [_err(f"Command exited with status: {outcome.returncode}")]
        return []
