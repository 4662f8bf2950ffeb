"""Filter and sort selection commands."""

import click
from vaultfilter.domain.entities import FilterState, SortDirection, SortField, StatusFilter
from vaultfilter.domain.vault_filter import VaultFilterService

STATUS_CHOICES = [member.value for member in StatusFilter]
SORT_FIELD_CHOICES = [member.value for member in SortField]
DIRECTION_CHOICES = [member.value for member in SortDirection]


def print_state(state: FilterState) -> None:
    """Print the persisted part of a filter state."""
    click.echo(f"Status filter: {state.status_filter.value}")
    click.echo(f"Sort: {state.sort_field.value} ({state.sort_direction.value})")


def apply_transition(ctx: click.Context, transition) -> None:
    """Run a transition against the session's stored state and print the result."""
    with VaultFilterService(storage=ctx.obj["storage"]) as service:
        transition(service)
        print_state(service.get_state())


@click.group()
def filter_group():
    """Manage the session's filter and sort selection."""
    pass


@filter_group.command("show")
@click.pass_context
def show_filters(ctx):
    """Show the current filter and sort selection."""
    apply_transition(ctx, lambda service: None)


@filter_group.command("status")
@click.argument("status", type=click.Choice(STATUS_CHOICES, case_sensitive=False))
@click.pass_context
def set_status(ctx, status: str):
    """Show only vaults with the given status."""
    apply_transition(ctx, lambda service: service.set_status_filter(status.lower()))


@filter_group.command("sort")
@click.argument("field", type=click.Choice(SORT_FIELD_CHOICES))
@click.pass_context
def set_sort(ctx, field: str):
    """Sort by FIELD. Choosing the current field again reverses the order."""
    apply_transition(ctx, lambda service: service.set_sort_field(field))


@filter_group.command("direction")
@click.argument("direction", type=click.Choice(DIRECTION_CHOICES, case_sensitive=False))
@click.pass_context
def set_direction(ctx, direction: str):
    """Set the sort direction explicitly."""
    apply_transition(ctx, lambda service: service.set_sort_direction(direction.lower()))


@filter_group.command("toggle")
@click.pass_context
def toggle_direction(ctx):
    """Reverse the sort direction."""
    apply_transition(ctx, lambda service: service.toggle_sort_direction())


@filter_group.command("reset")
@click.pass_context
def reset_filters(ctx):
    """Restore the default filter and sort selection."""
    apply_transition(ctx, lambda service: service.reset())


def register_commands(cli):
    """Register filter commands with main CLI."""
    cli.add_command(filter_group, name="filter")
