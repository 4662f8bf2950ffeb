"""Integration tests for end-to-end workflows."""

from vaultfilter.cli.main import cli
from vaultfilter.domain.entities import SortDirection, SortField, StatusFilter
from vaultfilter.domain.vault_filter import VaultFilterService
from vaultfilter.utils.vault_parser import load_vaults_file


def test_full_workflow(cli_runner, temp_storage, vaults_file):
    """Test complete workflow: filter → sort → view → reset → end session."""
    base = ["--db-path", temp_storage.database_path, "--session", "workflow"]

    # Step 1: Only withdrawn and unlocked vaults are interesting, start with unlocked
    result = cli_runner.invoke(cli, base + ["filter", "status", "unlocked"])
    assert result.exit_code == 0

    # Step 2: Largest first
    result = cli_runner.invoke(cli, base + ["filter", "sort", "amount"])
    assert result.exit_code == 0
    result = cli_runner.invoke(cli, base + ["filter", "sort", "amount"])
    assert "Sort: amount (desc)" in result.output

    # Step 3: View
    result = cli_runner.invoke(cli, base + ["view", vaults_file])
    assert result.exit_code == 0
    assert "2 of 4 vaults (sorted by amount desc)" in result.output
    rows = [line.split()[0] for line in result.output.splitlines() if line[:1].isdigit()]
    assert rows == ["2", "1"]

    # Step 4: Search within the filtered list
    result = cli_runner.invoke(cli, base + ["view", vaults_file, "--query", "holi"])
    assert "1 of 4 vaults" in result.output

    # Step 5: Reset and end the session
    result = cli_runner.invoke(cli, base + ["filter", "reset"])
    assert result.exit_code == 0
    result = cli_runner.invoke(cli, base + ["session", "end"])
    assert result.exit_code == 0
    result = cli_runner.invoke(cli, base + ["session", "show"])
    assert "has no stored items" in result.output


def test_service_over_sqlite_storage(temp_storage, vaults_file, scheduler):
    """Test that state chosen in one service instance carries into the next."""
    vaults = load_vaults_file(vaults_file)

    with VaultFilterService(vaults, storage=temp_storage, scheduler=scheduler) as service:
        service.set_status_filter(StatusFilter.LOCKED)
        service.set_sort_field(SortField.UNLOCK_HEIGHT)
        service.set_query("3")
        scheduler.advance(200)
        assert [v.id for v in service.get_result().vaults] == [3]

    with VaultFilterService(vaults, storage=temp_storage, scheduler=scheduler) as service:
        state = service.get_state()
        assert state.status_filter is StatusFilter.LOCKED
        assert state.sort_field is SortField.UNLOCK_HEIGHT
        assert state.sort_direction is SortDirection.ASC
        assert state.query == ""
        result = service.get_result()
        assert result.match_count == 1
        assert result.result_label == "1 of 4 vaults"
