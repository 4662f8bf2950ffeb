"""CLI error handling helpers."""

import click

from vaultfilter.domain.errors import DomainError, StorageError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Report a rejected input (bad vault file, unknown filter choice) and exit."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_storage_error(ctx: click.Context, error: StorageError) -> None:
    """Report that session storage could not be opened or written, and exit.

    Storage failures are never silently ignored on the command line, so the
    user knows their filter selection was not remembered.
    """
    click.echo(f"Error: session storage unavailable: {error}", err=True)
    click.echo("Hint: check --db-path or VAULTFILTER_DB_PATH", err=True)
    ctx.exit(1)
