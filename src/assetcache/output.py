"""Output helpers for user-facing and machine-readable text."""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write diagnostic or progress text for the operator to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", *, nl: bool = True) -> None:
    """Write structured results to stdout so they can be piped."""
    click.echo(message, nl=nl)
