"""
Shared test utilities and helpers for the Club League test suite.

Builders here go through the real reducer so every fixture state is one the
application could actually reach.
"""

from datetime import datetime, timedelta, timezone
from typing import Tuple

from league.core.actions import AddPlayer, CreateMatch, PlaceBet, StartMatch
from league.core.reducer import reduce
from league.core.state import AppState
from league.models import Match, Player

# Common test constants
API = "/api/v1"
NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
DEFAULT_PLAYER_NAMES = ("Alice", "Bob", "Carol", "Dave")


def later(seconds: float) -> datetime:
    """A moment `seconds` after NOW."""
    return NOW + timedelta(seconds=seconds)


def player_named(state: AppState, name: str) -> Player:
    return next(p for p in state.players.values() if p.name == name)


def add_players(state: AppState, *names: str) -> AppState:
    """Add players by name, in order."""
    for name in names:
        state = reduce(state, AddPlayer(name=name), now=NOW)
    return state


def create_pending_match(state: AppState, player1: str, player2: str) -> Tuple[AppState, Match]:
    """Create a match between two named players and return it."""
    state = reduce(state, CreateMatch(
        player1_id=player_named(state, player1).id,
        player2_id=player_named(state, player2).id,
    ))
    return state, state.matches[-1]


def create_live_match(state: AppState, player1: str, player2: str) -> Tuple[AppState, Match]:
    """Create and start a match between two named players."""
    state, match = create_pending_match(state, player1, player2)
    state = reduce(state, StartMatch(match_id=match.id), now=NOW)
    return state, state.find_match(match.id)


def bet_on(state: AppState, match: Match, bettor: str, winner: str, points: int) -> AppState:
    return reduce(state, PlaceBet(
        match_id=match.id,
        bettor_id=player_named(state, bettor).id,
        predicted_winner_id=player_named(state, winner).id,
        points=points,
    ), now=later(5))
