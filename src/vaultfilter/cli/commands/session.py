"""Session storage commands."""

import click
from vaultfilter.cli.error_handling import handle_domain_error
from vaultfilter.domain.errors import StorageError


@click.group()
def session_group():
    """Inspect or end the storage session."""
    pass


@session_group.command("show")
@click.pass_context
def show_session(ctx):
    """List the items stored for this session."""
    storage = ctx.obj["storage"]

    try:
        items = storage.list_items()
    except StorageError as e:
        handle_domain_error(ctx, e)

    if not items:
        click.echo(f"Session '{storage.session_id}' has no stored items.")
        return

    click.echo(f"\nSession '{storage.session_id}':")
    for item in items:
        click.echo(f"  {item.key} = {item.value}")


@session_group.command("end")
@click.pass_context
def end_session(ctx):
    """End the session, discarding everything stored for it."""
    storage = ctx.obj["storage"]

    try:
        storage.clear()
    except StorageError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Ended session '{storage.session_id}'.")


def register_commands(cli):
    """Register session commands with main CLI."""
    cli.add_command(session_group, name="session")
