import logging
import subprocess
from typing import Optional

from typing_extensions import override

from taminal.entities.output import ExecutionOutcome
from taminal.entities.profile import ExecutionMode
from taminal.exceptions import CommandNotFoundError
from taminal.ports.process.process_runner_port import ProcessRunnerPort


def _launch_error_text(exc: OSError) -> str:
    if exc.errno and exc.strerror:
        return f"{exc.strerror} (os error {exc.errno})"
    return str(exc)


def _decode_lines(data: Optional[bytes]) -> list[str]:
    if not data:
        return []
    return data.decode("utf-8", errors="replace").splitlines()


class SubprocessRunner(ProcessRunnerPort):
    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    @override
    def run(
        self, command: str, args: list[str], cwd: str, mode: ExecutionMode
    ) -> ExecutionOutcome:
        argv = [command, *args]
        captured = mode is ExecutionMode.CAPTURED
        self._logger.info(f"Running {argv} in {cwd} ({mode.value})")
        try:
            if captured:
                proc = subprocess.run(argv, cwd=cwd, capture_output=True, check=False)
            else:
                # stdin/stdout/stderr are inherited from the shell
                proc = subprocess.run(argv, cwd=cwd, check=False)
        except OSError as e:
            self._logger.warning(f"Failed to launch {command}: {e}")
            raise CommandNotFoundError(command, _launch_error_text(e))

        self._logger.info(f"{command} exited with {proc.returncode}")
        return ExecutionOutcome(
            command=command,
            returncode=proc.returncode,
            stdout_lines=_decode_lines(proc.stdout) if captured else [],
            stderr_lines=_decode_lines(proc.stderr) if captured else [],
            captured=captured,
        )
