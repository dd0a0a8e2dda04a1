from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BuildResult:
    success: bool
    exit_code: int | None
    elapsed_seconds: float


class BuildRunner(ABC):
    @abstractmethod
    def run(self, cmd: list[str], *, cwd: Path, env: Mapping[str, str]) -> BuildResult:
        """Run the build command to completion.

        Output is passed through to the terminal; only the exit status is observed.

        Args:
            cmd: Command and arguments
            cwd: Directory to run in
            env: Variables layered over the inherited process environment

        Returns:
            BuildResult with success flag, exit code (None if the command could
            not be started) and wall-clock duration
        """
        ...
