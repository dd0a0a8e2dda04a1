from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from assetcache.gateway.build_runner.abc import BuildResult, BuildRunner


@dataclass(frozen=True)
class BuildCall:
    cmd: list[str]
    cwd: Path
    env: dict[str, str]


class FakeBuildRunner(BuildRunner):
    def __init__(self, *, succeeds: bool, elapsed_seconds: float = 1.5) -> None:
        self._succeeds = succeeds
        self._elapsed_seconds = elapsed_seconds
        self._run_calls: list[BuildCall] = []

    @classmethod
    def create_succeeding(cls) -> "FakeBuildRunner":
        """Create a FakeBuildRunner whose builds always succeed."""
        return cls(succeeds=True)

    @classmethod
    def create_failing(cls) -> "FakeBuildRunner":
        """Create a FakeBuildRunner whose builds always exit non-zero."""
        return cls(succeeds=False)

    def run(self, cmd: list[str], *, cwd: Path, env: Mapping[str, str]) -> BuildResult:
        self._run_calls.append(BuildCall(cmd=list(cmd), cwd=cwd, env=dict(env)))
        return BuildResult(
            success=self._succeeds,
            exit_code=0 if self._succeeds else 1,
            elapsed_seconds=self._elapsed_seconds,
        )

    @property
    def run_calls(self) -> list[BuildCall]:
        return list(self._run_calls)
