"""Resolve the environment the asset build runs with.

The build boots the application, which expects a configured database even
though precompilation never connects to one. A placeholder DATABASE_URL is
derived from the bundled database driver when none is configured.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from assetcache.gateway.detector.abc import DependencyDetector

DEFAULT_DATABASE_SCHEME = "postgres"

# Checked in order; the first bundled driver wins
DATABASE_SCHEMES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("pg", "jdbc-postgres"), "postgres"),
    (("mysql",), "mysql"),
    (("mysql2",), "mysql2"),
    (("sqlite3", "sqlite3-ruby"), "sqlite3"),
)


@dataclass(frozen=True)
class BuildEnvironment:
    """Variables layered over the inherited environment for one build."""

    variables: dict[str, str]

    def as_overlay(self) -> dict[str, str]:
        return dict(self.variables)


def detect_database_scheme(detector: DependencyDetector, *, default: str) -> str:
    """Pick a database URL scheme from the bundled drivers."""
    for drivers, scheme in DATABASE_SCHEMES:
        if any(detector.is_bundled(driver) for driver in drivers):
            return scheme
    return default


def placeholder_database_url(scheme: str) -> str:
    return f"{scheme}://user:pass@127.0.0.1/dbname"


def resolve_build_environment(
    *,
    base_env: Mapping[str, str],
    configured_env: Mapping[str, str],
    detector: DependencyDetector,
    app_dir: Path,
    default_scheme: str,
) -> BuildEnvironment:
    """Compute the build overlay once, before the build starts.

    Values present in base_env or configured_env are never replaced; only
    unset variables receive defaults. The app's bin/ directory is appended to
    PATH so binstubs resolve.
    """
    variables = dict(configured_env)

    def set_default(key: str, value: str) -> None:
        if key not in base_env and key not in variables:
            variables[key] = value

    if "DATABASE_URL" not in base_env and "DATABASE_URL" not in variables:
        scheme = detect_database_scheme(detector, default=default_scheme)
        variables["DATABASE_URL"] = placeholder_database_url(scheme)
    set_default("RAILS_GROUPS", "assets")
    set_default("RAILS_ENV", "production")

    path = variables.get("PATH", base_env.get("PATH", ""))
    bin_dir = str(app_dir / "bin")
    variables["PATH"] = f"{path}{os.pathsep}{bin_dir}" if path else bin_dir

    return BuildEnvironment(variables=variables)
