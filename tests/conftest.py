import pytest

from league.core.state import AppState
from league.core.store import StateStore
from league.services.storage import GameDataStorage
from tests.utils import DEFAULT_PLAYER_NAMES, add_players


@pytest.fixture
def empty_state() -> AppState:
    return AppState()


@pytest.fixture
def roster() -> AppState:
    """A state with four fresh players and nothing else."""
    return add_players(AppState(), *DEFAULT_PLAYER_NAMES)


@pytest.fixture
def store() -> StateStore:
    return StateStore()


@pytest.fixture
def storage(tmp_path) -> GameDataStorage:
    """Snapshot storage writing into a per-test directory."""
    return GameDataStorage(tmp_path / "game-data.json")
