"""assetcache CLI entry point.

This package provides a Click-based CLI that decides whether an asset build
needs to run, caches its output between deploys, and expires unused assets.
See `assetcache --help` for details.
"""

from assetcache.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `assetcache` console script."""
    cli()
