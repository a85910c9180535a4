"""
Tests for the BuiltinDispatcher under both front end profiles.
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

from taminal.entities.output import OutputLine, Stream
from taminal.entities.profile import CLEAR_SCREEN_SEQUENCE, CLEARED_BANNER, ShellProfile
from taminal.ports.files.file_system_port import FileSystemPort
from taminal.use_cases.files.list_directory import ListDirectoryUseCase
from taminal.use_cases.files.make_directories import MakeDirectoriesUseCase
from taminal.use_cases.files.remove_directories import RemoveDirectoriesUseCase
from taminal.use_cases.files.remove_files import RemoveFilesUseCase
from taminal.use_cases.navigation.change_directory import ChangeDirectoryUseCase
from taminal.use_cases.process.run_external import RunExternalCommandUseCase
from taminal.use_cases.shell.dispatcher import BuiltinDispatcher


def texts(lines):
    return [line.text for line in lines]


def write_script(directory, name, body):
    path = os.path.join(directory, name)
    with open(path, "w") as f:
        f.write(body)
    return path


@pytest.fixture
def gui(dependency_container, temp_directory):
    dispatcher = dependency_container.get_dispatcher(ShellProfile.gui())
    return dispatcher, dispatcher.new_session(temp_directory)


@pytest.fixture
def cli(dependency_container, temp_directory, monkeypatch):
    monkeypatch.chdir(temp_directory)
    dispatcher = dependency_container.get_dispatcher(ShellProfile.cli())
    return dispatcher, dispatcher.new_session()


class TestDispatcherCommon:
    def test_blank_line_is_ignored(self, gui):
        dispatcher, session = gui

        assert dispatcher.process_line("   \n", session) == []
        assert session.history == []

    def test_blank_line_resets_history_cursor(self, gui):
        dispatcher, session = gui
        dispatcher.process_line("pwd", session)
        session.history_previous()

        dispatcher.process_line("   ", session)

        assert session.history_cursor == 1
        assert session.history_previous() == "pwd"

    def test_history_and_output_buffer(self, gui):
        dispatcher, session = gui

        lines = dispatcher.process_line("pwd\n", session)

        assert session.history == ["pwd"]
        assert list(session.output)[-1] == lines[-1]

    def test_dispatchers_are_cached_per_profile(self, dependency_container):
        gui_dispatcher = dependency_container.get_dispatcher(ShellProfile.gui())

        assert dependency_container.get_dispatcher(ShellProfile.gui()) is gui_dispatcher
        assert dependency_container.get_dispatcher(ShellProfile.cli()) is not gui_dispatcher

    def test_unexpected_failure_is_reported(self, mock_logger):
        list_directory = MagicMock(spec=ListDirectoryUseCase)
        list_directory.execute.side_effect = RuntimeError("boom")
        dispatcher = BuiltinDispatcher(
            ShellProfile.gui(),
            MagicMock(spec=FileSystemPort),
            MagicMock(spec=ChangeDirectoryUseCase),
            list_directory,
            MagicMock(spec=MakeDirectoriesUseCase),
            MagicMock(spec=RemoveDirectoriesUseCase),
            MagicMock(spec=RemoveFilesUseCase),
            MagicMock(spec=RunExternalCommandUseCase),
            mock_logger,
        )
        session = dispatcher.new_session("/somewhere")

        lines = dispatcher.process_line("ls", session)

        assert texts(lines) == ["ls: boom"]
        assert lines[0].is_error
        mock_logger.exception.assert_called_once()


class TestGuiProfile:
    def test_mkdir_announces_then_fails(self, gui):
        dispatcher, session = gui

        assert texts(dispatcher.process_line("mkdir x", session)) == ["Created directory: x"]
        lines = dispatcher.process_line("mkdir x", session)
        assert texts(lines) == ["mkdir: cannot create directory 'x': File exists"]
        assert lines[0].is_error

    def test_cd_and_pwd(self, gui, temp_directory):
        dispatcher, session = gui
        subdir = os.path.join(temp_directory, "subdir")

        assert texts(dispatcher.process_line("cd subdir", session)) == [f"Changed to: {subdir}"]
        assert texts(dispatcher.process_line("pwd", session)) == [subdir]
        assert session.directory_name == "subdir"

    def test_cd_into_file(self, gui, temp_directory):
        dispatcher, session = gui

        lines = dispatcher.process_line("cd test1.txt", session)

        assert texts(lines) == ["cd: test1.txt: Not a directory"]
        assert session.current_directory == temp_directory

    def test_cd_completion_single_candidate(self, gui, temp_directory):
        dispatcher, session = gui

        lines = dispatcher.process_line("cd su\t", session)

        assert texts(lines) == [f"Changed to: {os.path.join(temp_directory, 'subdir')}"]

    def test_cd_completion_trailing_separator(self, gui, temp_directory):
        dispatcher, session = gui
        inner = os.path.join(temp_directory, "subdir", "inner")
        os.remove(os.path.join(temp_directory, "subdir", "test3.md"))
        os.mkdir(inner)

        lines = dispatcher.process_line("cd subdir/\t", session)

        assert texts(lines) == [f"Changed to: {inner}"]
        assert session.current_directory == inner

    def test_cd_dangling_symlink(self, gui, temp_directory):
        dispatcher, session = gui
        os.symlink(os.path.join(temp_directory, "gone"), os.path.join(temp_directory, "dangling"))

        lines = dispatcher.process_line("cd dangling", session)

        assert texts(lines) == ["cd: dangling: No such file or directory"]

    def test_cd_completion_several_candidates(self, gui, temp_directory):
        dispatcher, session = gui

        lines = dispatcher.process_line("cd test\t", session)

        assert texts(lines) == ["Possible completions:", "  test1.txt", "  test2.py"]
        assert session.current_directory == temp_directory

    def test_cd_completion_no_candidate(self, gui):
        dispatcher, session = gui

        assert dispatcher.process_line("cd zz\t", session) == []

    def test_trigger_is_ignored_outside_cd(self, gui):
        dispatcher, session = gui

        lines = dispatcher.process_line("ls subdir\t", session)

        assert texts(lines) == ["test3.md".ljust(20)]

    def test_ls(self, gui):
        dispatcher, session = gui

        lines = dispatcher.process_line("ls", session)

        assert texts(lines) == ["subdir/".ljust(20) + "test1.txt".ljust(20) + "test2.py".ljust(20)]

    def test_ls_missing(self, gui):
        dispatcher, session = gui

        assert texts(dispatcher.process_line("ls ghost", session)) == [
            "ls: ghost: No such file or directory"
        ]

    def test_rm_is_lenient_and_quiet(self, gui, temp_directory):
        dispatcher, session = gui

        assert dispatcher.process_line("rm -x test1.txt", session) == []
        assert not os.path.exists(os.path.join(temp_directory, "test1.txt"))

    def test_rm_directory_without_recursive(self, gui):
        dispatcher, session = gui

        assert texts(dispatcher.process_line("rm -f subdir", session)) == [
            "rm: cannot remove 'subdir': Is a directory"
        ]

    def test_missing_operand_without_hint(self, gui):
        dispatcher, session = gui

        assert texts(dispatcher.process_line("rm -f", session)) == ["rm: missing operand"]
        assert texts(dispatcher.process_line("mkdir", session)) == ["mkdir: missing operand"]

    def test_rmdir_not_empty(self, gui):
        dispatcher, session = gui

        assert texts(dispatcher.process_line("rmdir subdir", session)) == [
            "rmdir: failed to remove 'subdir': Directory not empty"
        ]

    def test_clear(self, gui):
        dispatcher, session = gui
        dispatcher.process_line("pwd", session)

        lines = dispatcher.process_line("clear", session)

        assert texts(lines) == [CLEARED_BANNER]
        assert session.output_text() == [CLEARED_BANNER]

    def test_exit_is_refused(self, gui):
        dispatcher, session = gui

        assert texts(dispatcher.process_line("quit", session)) == [
            "Use the window close button to exit"
        ]
        assert not session.exit_requested

    def test_help(self, gui):
        dispatcher, session = gui

        lines = texts(dispatcher.process_line("help", session))

        assert lines[0] == "=== Available Commands ==="
        assert any("Ctrl+L" in line for line in lines)

    def test_external_output_is_captured(self, gui, temp_directory):
        dispatcher, session = gui
        write_script(
            temp_directory,
            "both.py",
            "import sys\nprint('hello')\nprint('bad', file=sys.stderr)\nsys.exit(1)\n",
        )

        lines = dispatcher.process_line(f"{sys.executable} both.py", session)

        assert texts(lines) == ["hello", "[ERROR] bad"]
        assert [line.stream for line in lines] == [Stream.STDOUT, Stream.STDERR]

    def test_external_runs_in_session_directory(self, gui, temp_directory, monkeypatch):
        dispatcher, session = gui
        monkeypatch.chdir("/")
        write_script(temp_directory, "cwd.py", "import os\nprint(os.getcwd())\n")

        lines = dispatcher.process_line(f"{sys.executable} cwd.py", session)

        assert texts(lines) == [temp_directory]

    def test_command_not_found(self, gui):
        dispatcher, session = gui

        (line,) = dispatcher.process_line("no-such-command-xyz --flag", session)

        assert line.text.startswith("no-such-command-xyz: command not found (")
        assert line.is_error

    def test_output_limit(self, dependency_container, temp_directory):
        dispatcher = dependency_container.get_dispatcher(ShellProfile.gui(output_limit=5))
        session = dispatcher.new_session(temp_directory)

        for _ in range(10):
            dispatcher.process_line("pwd", session)

        assert len(session.output) == 5


class TestCliProfile:
    def test_mkdir_is_quiet(self, cli, temp_directory):
        dispatcher, session = cli

        assert dispatcher.process_line("mkdir x", session) == []
        assert os.path.isdir(os.path.join(temp_directory, "x"))

    def test_cd_changes_process_directory(self, cli, temp_directory):
        dispatcher, session = cli

        assert dispatcher.process_line("cd subdir", session) == []
        assert os.getcwd() == os.path.join(temp_directory, "subdir")
        assert session.current_directory == os.getcwd()

    def test_directory_is_synced_from_process(self, cli, temp_directory):
        dispatcher, session = cli
        os.chdir(os.path.join(temp_directory, "subdir"))

        assert texts(dispatcher.process_line("pwd", session)) == [
            os.path.join(temp_directory, "subdir")
        ]

    def test_invalid_option_aborts(self, cli, temp_directory):
        dispatcher, session = cli

        lines = dispatcher.process_line("rm -x test1.txt", session)

        assert texts(lines) == ["rm: invalid option -- 'x'"]
        assert os.path.exists(os.path.join(temp_directory, "test1.txt"))

    def test_missing_operand_with_hint(self, cli):
        dispatcher, session = cli

        assert texts(dispatcher.process_line("rmdir", session)) == [
            "rmdir: missing operand",
            "Try 'rmdir --help' for more information.",
        ]

    def test_rm_force_missing_is_silent(self, cli):
        dispatcher, session = cli

        assert dispatcher.process_line("rm -f ghost", session) == []
        assert texts(dispatcher.process_line("rm ghost", session)) == [
            "rm: cannot remove 'ghost': No such file or directory"
        ]

    def test_clear_emits_escape_sequence(self, cli):
        dispatcher, session = cli

        lines = dispatcher.process_line("clear", session)

        assert lines == [OutputLine(CLEAR_SCREEN_SEQUENCE, Stream.CONTROL)]

    def test_exit_requests_exit(self, cli):
        dispatcher, session = cli

        assert dispatcher.process_line("exit", session) == []
        assert session.exit_requested

    def test_external_status_is_reported(self, cli, temp_directory):
        dispatcher, session = cli
        write_script(temp_directory, "fail.py", "import sys\nsys.exit(3)\n")

        lines = dispatcher.process_line(f"{sys.executable} fail.py", session)

        assert texts(lines) == ["Command exited with status: 3"]

    def test_external_success_is_silent(self, cli, temp_directory):
        dispatcher, session = cli
        write_script(temp_directory, "ok.py", "pass\n")

        assert dispatcher.process_line(f"{sys.executable} ok.py", session) == []
