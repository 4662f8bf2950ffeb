"""Vault list viewing command."""

import click
from vaultfilter.cli.error_handling import handle_domain_error
from vaultfilter.domain.predicates import derive_status
from vaultfilter.domain.vault_filter import VaultFilterService
from vaultfilter.utils.vault_parser import load_vaults_file


@click.command("view")
@click.argument("vaults_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--query", "-q", default="", help="Search text matched against vault ID and label")
@click.option("--verbose", "-v", is_flag=True, help="Show all fields for each vault")
@click.pass_context
def view_vaults(ctx, vaults_file: str, query: str, verbose: bool):
    """View vaults using the session's filter and sort selection.

    Use 'vaultfilter filter' to change the status filter or sort order.
    """
    storage = ctx.obj["storage"]

    try:
        vaults = load_vaults_file(vaults_file)
    except ValueError as e:
        handle_domain_error(ctx, e)

    # The whole query is known up front, so apply it without a debounce delay
    with VaultFilterService(vaults, storage=storage, debounce_ms=0) as service:
        service.set_query(query)
        result = service.get_result()
        state = service.get_state()

    if not result.vaults:
        click.echo("No vaults found.")
        return

    order = f"{state.sort_field.value} {state.sort_direction.value}"
    click.echo(f"\nShowing {result.result_label} (sorted by {order}):")

    if verbose:
        click.echo("=" * 80)
        for vault in result.vaults:
            click.echo(f"\nVault ID: {vault.id}")
            click.echo(f"  Amount: {vault.amount:,}")
            click.echo(f"  Status: {derive_status(vault).value}")
            click.echo(f"  Created at block: {vault.created_at}")
            click.echo(f"  Unlocks at block: {vault.unlock_height}")
            click.echo(f"  Current block: {vault.current_block_height}")
            if vault.label:
                click.echo(f"  Label: {vault.label}")
            click.echo("-" * 80)
    else:
        click.echo("-" * 80)
        click.echo(
            f"{'ID':<6} {'Amount':>14} {'Status':<10} {'Unlock':>10} {'Created':>10}  {'Label':<24}"
        )
        click.echo("-" * 80)
        for vault in result.vaults:
            label = (vault.label or "")[:24]
            click.echo(
                f"{vault.id:<6} {vault.amount:>14,} {derive_status(vault).value:<10} "
                f"{vault.unlock_height:>10} {vault.created_at:>10}  {label:<24}"
            )


def register_commands(cli):
    """Register view command with main CLI."""
    cli.add_command(view_vaults)
