"""Shared pytest fixtures for vaultfilter tests."""

import tempfile
import os
from decimal import Decimal
from pathlib import Path
import pytest

from vaultfilter.database.factories import create_sqlite_storage
from vaultfilter.database.memory import MemorySessionStorage
from vaultfilter.domain.entities import Vault


class FakeTimer:
    """Timer handle returned by FakeScheduler."""

    def __init__(self, due_ms: int, callback):
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Manually advanced clock, in whole milliseconds."""

    def __init__(self):
        self.now_ms = 0
        self.timers: list[FakeTimer] = []

    def call_later(self, delay: float, callback) -> FakeTimer:
        timer = FakeTimer(self.now_ms + round(delay * 1000), callback)
        self.timers.append(timer)
        return timer

    @property
    def active_timers(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled]

    def advance(self, ms: int) -> None:
        """Move the clock forward, firing due timers in order."""
        target = self.now_ms + ms
        while True:
            due = sorted(
                (t for t in self.active_timers if t.due_ms <= target),
                key=lambda t: t.due_ms,
            )
            if not due:
                break
            timer = due[0]
            self.now_ms = timer.due_ms
            timer.cancelled = True
            timer.callback()
        self.now_ms = target

    def advance_to(self, ms: int) -> None:
        self.advance(ms - self.now_ms)


def make_vault(
    id: int,
    amount=1000,
    unlock_height: int = 200,
    created_at: int = 100,
    is_withdrawn: bool = False,
    current_block_height: int = 150,
    label=None,
) -> Vault:
    """Build a Vault with sensible defaults for tests."""
    return Vault(
        id=id,
        amount=Decimal(amount),
        unlock_height=unlock_height,
        created_at=created_at,
        is_withdrawn=is_withdrawn,
        current_block_height=current_block_height,
        label=label,
    )


@pytest.fixture
def temp_storage():
    """Create a temporary SQLite session storage for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    storage = create_sqlite_storage(database_path=db_path, session_id="test-session")
    # Store the path for tests that need it
    storage.database_path = db_path
    storage.connect()
    storage.initialize_schema()

    yield storage

    # Cleanup
    storage.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def memory_storage():
    """Create an in-memory session storage."""
    return MemorySessionStorage()


@pytest.fixture
def scheduler():
    """Create a manually advanced scheduler."""
    return FakeScheduler()


@pytest.fixture
def sample_vaults():
    """Vaults covering every derived status, with and without labels."""
    return (
        make_vault(3, amount=3000, unlock_height=300, created_at=30, label="Emergency fund"),
        make_vault(1, amount=1000, unlock_height=100, created_at=10),
        make_vault(2, amount=2000, unlock_height=140, created_at=20, label="Holiday"),
        make_vault(12, amount=2000, unlock_height=120, created_at=5, is_withdrawn=True),
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def vaults_file(fixtures_dir):
    """Return the path to the sample vaults JSON file."""
    return str(fixtures_dir / "vaults.json")


@pytest.fixture
def vault_factory():
    """Return the make_vault helper."""
    return make_vault
