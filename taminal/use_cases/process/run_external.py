import logging
from typing import Optional

from taminal.entities.output import ExecutionOutcome
from taminal.entities.profile import ExecutionMode
from taminal.exceptions import CommandNotFoundError
from taminal.ports.process.process_runner_port import ProcessRunnerPort


class RunExternalCommandUseCase:
    def __init__(
        self, runner: ProcessRunnerPort, logger: Optional[logging.Logger] = None
    ) -> None:
        self._runner = runner
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self, command: str, args: list[str], cwd: str, mode: ExecutionMode
    ) -> ExecutionOutcome:
        try:
            return self._runner.run(command, args, cwd, mode)
        except CommandNotFoundError:
            raise
        except Exception as e:
            self._logger.error(f"Failed to run {command}: {e}")
            raise CommandNotFoundError(command, str(e))
