from abc import ABC, abstractmethod

from taminal.entities.output import ExecutionOutcome
from taminal.entities.profile import ExecutionMode


class ProcessRunnerPort(ABC):
    @abstractmethod
    def run(
        self, command: str, args: list[str], cwd: str, mode: ExecutionMode
    ) -> ExecutionOutcome:
        """
        Run an external command to completion in the given working directory.

        In INTERACTIVE mode the child inherits the standard streams; in CAPTURED
        mode its stdout/stderr are collected into the outcome.

        Returns:
            ExecutionOutcome of the finished child

        Raises:
            CommandNotFoundError: If the command cannot be launched
        """
        pass
