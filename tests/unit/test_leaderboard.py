"""
Unit tests for leaderboard and match listing helpers.
"""

from league.core.leaderboard import (
    betting_leaderboard,
    matches_with_status,
    ranked_players,
    win_rate,
)
from league.core.matches import complete_match
from league.models import MatchStatus
from tests.utils import bet_on, create_live_match, create_pending_match, player_named


def _play(state, winner, loser):
    state, match = create_live_match(state, winner, loser)
    return complete_match(state, match.id, player_named(state, winner).id)


def test_ranked_players(roster):
    state = _play(roster, "Carol", "Alice")
    state = _play(state, "Carol", "Bob")

    ranked = ranked_players(state)

    assert ranked[0].name == "Carol"
    assert [p.elo for p in ranked] == sorted((p.elo for p in ranked), reverse=True)
    assert len(ranked_players(state, limit=2)) == 2


def test_win_rate(roster):
    state = _play(roster, "Alice", "Bob")
    state = _play(state, "Bob", "Alice")
    state = _play(state, "Alice", "Bob")

    assert round(win_rate(player_named(state, "Alice")), 1) == 66.7
    assert win_rate(player_named(state, "Carol")) == 0.0


def test_betting_leaderboard(roster):
    state, match = create_live_match(roster, "Alice", "Bob")
    state = bet_on(state, match, "Carol", "Alice", 20)
    state = bet_on(state, match, "Dave", "Alice", 100)
    state = complete_match(state, match.id, player_named(state, "Alice").id)

    board = betting_leaderboard(state)

    assert [p.name for p in board] == ["Dave", "Carol"]


def test_match_listings(roster):
    state = _play(roster, "Alice", "Bob")
    state, _ = create_pending_match(state, "Carol", "Dave")
    state, _ = create_live_match(state, "Alice", "Carol")

    assert len(matches_with_status(state)) == 3
    assert len(matches_with_status(state, MatchStatus.COMPLETED)) == 1
    assert len(matches_with_status(state, MatchStatus.PENDING)) == 1
    assert [m.player2.name for m in matches_with_status(state, MatchStatus.IN_PROGRESS)] == ["Carol"]
    assert matches_with_status(state, MatchStatus.CANCELLED) == []
