import shlex
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from assetcache.core.build_env import DEFAULT_DATABASE_SCHEME
from assetcache.core.sweeper import DEFAULT_EXPIRE_AFTER

DEFAULT_ARTIFACT_DIR = "public/assets"
DEFAULT_MANIFEST = "manifest.yml"
DEFAULT_BUILD_COMMAND = "bundle exec rake assets:precompile"
DEFAULT_CACHE_DIR = ".assetcache/cache"

EXPIRE_AFTER_ENV_VAR = "EXPIRE_ASSETS_AFTER"
CACHE_DIR_ENV_VAR = "CACHE_DIR"


class ConfigError(Exception):
    """Raised when configuration cannot be parsed or is out of range."""


@dataclass(frozen=True)
class AssetCacheConfig:
    """In-memory representation of `.assetcache/config.toml` merged with env overrides.

    Example config.toml:
      artifact_dir = "public/assets"
      build_command = "bundle exec rake assets:precompile"
      expire_after = 604800

      [env]
      RAILS_ENV = "staging"
    """

    artifact_dir: Path
    manifest_path: Path
    build_command: list[str]
    cache_dir: Path
    namespace: str
    expire_after: timedelta
    database_scheme: str
    env: dict[str, str]


def parse_expire_after(raw: object, *, source: str) -> timedelta:
    """Parse a number of seconds into a non-negative timedelta."""
    if isinstance(raw, bool):
        raise ConfigError(f"{source} must be a number of seconds, got {raw!r}")
    if isinstance(raw, int):
        seconds = raw
    else:
        try:
            seconds = int(str(raw).strip())
        except ValueError:
            raise ConfigError(f"{source} must be a number of seconds, got {raw!r}") from None
    if seconds < 0:
        raise ConfigError(f"{source} must not be negative, got {seconds}")
    return timedelta(seconds=seconds)


def get_config_path(app_dir: Path) -> Path:
    """Get path to config.toml file."""
    return app_dir / ".assetcache" / "config.toml"


def _read_config_file(app_dir: Path) -> dict[str, object]:
    cfg_path = get_config_path(app_dir)
    if not cfg_path.exists():
        return {}
    try:
        return tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid {cfg_path}: {e}") from e


def load_config(app_dir: Path, environ: Mapping[str, str]) -> AssetCacheConfig:
    """Load config.toml from the app's .assetcache directory if present; otherwise defaults.

    EXPIRE_ASSETS_AFTER and CACHE_DIR in environ override the file.
    """
    data = _read_config_file(app_dir)

    artifact_dir_name = str(data.get("artifact_dir", DEFAULT_ARTIFACT_DIR))
    artifact_dir = app_dir / artifact_dir_name
    manifest_path = artifact_dir / str(data.get("manifest", DEFAULT_MANIFEST))

    build_command = shlex.split(str(data.get("build_command", DEFAULT_BUILD_COMMAND)))
    if not build_command:
        raise ConfigError("build_command must not be empty")

    cache_dir_name = environ.get(CACHE_DIR_ENV_VAR) or str(data.get("cache_dir", DEFAULT_CACHE_DIR))
    cache_dir = app_dir / cache_dir_name

    if EXPIRE_AFTER_ENV_VAR in environ:
        expire_after = parse_expire_after(
            environ[EXPIRE_AFTER_ENV_VAR], source=EXPIRE_AFTER_ENV_VAR
        )
    elif "expire_after" in data:
        expire_after = parse_expire_after(data["expire_after"], source="expire_after")
    else:
        expire_after = DEFAULT_EXPIRE_AFTER

    raw_env = data.get("env", {})
    if not isinstance(raw_env, dict):
        raise ConfigError("[env] must be a table")
    env = {str(k): str(v) for k, v in raw_env.items()}

    return AssetCacheConfig(
        artifact_dir=artifact_dir,
        manifest_path=manifest_path,
        build_command=build_command,
        cache_dir=cache_dir,
        namespace=str(data.get("namespace", artifact_dir_name)),
        expire_after=expire_after,
        database_scheme=str(data.get("database_scheme", DEFAULT_DATABASE_SCHEME)),
        env=env,
    )


def default_config(app_dir: Path) -> AssetCacheConfig:
    """Defaults with no config file and no environment overrides."""
    artifact_dir = app_dir / DEFAULT_ARTIFACT_DIR
    return AssetCacheConfig(
        artifact_dir=artifact_dir,
        manifest_path=artifact_dir / DEFAULT_MANIFEST,
        build_command=shlex.split(DEFAULT_BUILD_COMMAND),
        cache_dir=app_dir / DEFAULT_CACHE_DIR,
        namespace=DEFAULT_ARTIFACT_DIR,
        expire_after=DEFAULT_EXPIRE_AFTER,
        database_scheme=DEFAULT_DATABASE_SCHEME,
        env={},
    )
