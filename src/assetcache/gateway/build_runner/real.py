import os
import shutil
import subprocess
import time
from collections.abc import Mapping
from pathlib import Path

from assetcache.gateway.build_runner.abc import BuildResult, BuildRunner


class RealBuildRunner(BuildRunner):
    def run(self, cmd: list[str], *, cwd: Path, env: Mapping[str, str]) -> BuildResult:
        merged_env = {**os.environ, **env}

        # LBYL: Check if command exists first, using the PATH the build will see
        if shutil.which(cmd[0], path=merged_env.get("PATH")) is None:
            return BuildResult(success=False, exit_code=None, elapsed_seconds=0.0)

        started = time.monotonic()
        result = subprocess.run(
            cmd,
            cwd=cwd,
            env=merged_env,
            check=False,
            stderr=subprocess.STDOUT,
        )
        elapsed = time.monotonic() - started
        return BuildResult(
            success=result.returncode == 0,
            exit_code=result.returncode,
            elapsed_seconds=elapsed,
        )
