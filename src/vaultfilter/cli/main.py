"""Main CLI entry point."""

import click
from vaultfilter.cli.error_handling import handle_storage_error
from vaultfilter.database.factories import create_sqlite_storage
from vaultfilter.domain.errors import StorageError

# Import and register all commands at module level
from vaultfilter.cli.commands import filter_cmd, session, view


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to session storage file (overrides VAULTFILTER_DB_PATH environment variable)",
    envvar="VAULTFILTER_DB_PATH",
)
@click.option(
    "--session",
    "session_id",
    help="Session identifier (overrides VAULTFILTER_SESSION environment variable)",
    envvar="VAULTFILTER_SESSION",
)
@click.pass_context
def cli(ctx, db_path: str | None, session_id: str | None):
    """Vaultfilter - search, filter and sort savings vaults.

    Filter and sort selections are remembered for the current session;
    search text is not.
    """
    ctx.ensure_object(dict)

    # Open storage only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            storage = create_sqlite_storage(database_path=db_path, session_id=session_id)
        except StorageError as e:
            handle_storage_error(ctx, e)
        storage.connect()
        storage.initialize_schema()
        ctx.obj["storage"] = storage
        ctx.call_on_close(storage.disconnect)


# Register all commands
view.register_commands(cli)
filter_cmd.register_commands(cli)
session.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
