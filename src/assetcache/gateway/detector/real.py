"""Real DependencyDetector reading Gemfile.lock and the Rakefile."""

import re
from functools import cached_property
from pathlib import Path

from assetcache.gateway.detector.abc import DependencyDetector

# "    name (1.2.3)" under a "  specs:" header
_SPEC_LINE = re.compile(r"^ {4}([A-Za-z0-9_.\-]+)(?: \(|$)")


def parse_locked_dependencies(lockfile_text: str) -> frozenset[str]:
    """Extract top-level dependency names from the specs: sections of a lockfile."""
    names: set[str] = set()
    in_specs = False
    for line in lockfile_text.splitlines():
        if line.strip() == "specs:":
            in_specs = True
            continue
        if in_specs and line and not line.startswith("    "):
            in_specs = False
        if not in_specs:
            continue
        match = _SPEC_LINE.match(line)
        if match is not None:
            names.add(match.group(1))
    return frozenset(names)


class RealDependencyDetector(DependencyDetector):
    """Production implementation backed by files in the application directory."""

    def __init__(self, app_dir: Path) -> None:
        self._app_dir = app_dir

    @cached_property
    def _locked(self) -> frozenset[str]:
        lockfile = self._app_dir / "Gemfile.lock"
        if not lockfile.exists():
            return frozenset()
        return parse_locked_dependencies(lockfile.read_text(encoding="utf-8"))

    def is_bundled(self, name: str) -> bool:
        return name in self._locked

    def build_step_applies(self) -> bool:
        return (self._app_dir / "Rakefile").is_file()
