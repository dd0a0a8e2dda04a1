"""No-op build runner for dry-run mode.

This module provides a build runner that prevents actual command execution
while logging what would have been done.
"""

import shlex
from collections.abc import Mapping
from pathlib import Path

from assetcache.gateway.build_runner.abc import BuildResult, BuildRunner
from assetcache.output import user_output


class DryRunBuildRunner(BuildRunner):
    """No-op wrapper that prevents build execution in dry-run mode.

    Running the build is a mutation, so run() only prints what would happen
    and reports success.
    """

    def __init__(self, wrapped: BuildRunner) -> None:
        """Create a dry-run wrapper around a BuildRunner implementation.

        Args:
            wrapped: The BuildRunner implementation to wrap
        """
        self._wrapped = wrapped

    def run(self, cmd: list[str], *, cwd: Path, env: Mapping[str, str]) -> BuildResult:
        user_output(f"[DRY RUN] Would run build: {shlex.join(cmd)}")
        return BuildResult(success=True, exit_code=0, elapsed_seconds=0.0)
