"""
ELO rating engine.

Standard chess-style ELO with a fixed K-factor:
  Expected score: E_A = 1 / (1 + 10^((R_B - R_A) / 400))
  Rating change:  delta_A = round(K * (actual - E_A))

Each player's change is rounded on its own, so the winner's gain and the
loser's loss can differ by one point. Ratings never drop below MIN_ELO.
"""

import math
from dataclasses import dataclass
from typing import Any

from league.models.player import STARTING_BETTING_POOL

K_FACTOR = 32
DEFAULT_ELO = 1200
MIN_ELO = 100


@dataclass(frozen=True)
class EloResult:
    """Outcome of a single rated match, from player 1's and player 2's side."""
    new_player1_elo: int
    new_player2_elo: int
    player1_change: int
    player2_change: int


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def expected_score(rating_a: float, rating_b: float) -> float:
    """Expected probability of A beating B."""
    return 1 / (1 + 10 ** ((rating_b - rating_a) / 400))


def win_probability(player1_elo: float, player2_elo: float) -> float:
    return expected_score(player1_elo, player2_elo)


def rating_change(rating_winner: float, rating_loser: float) -> tuple[int, int]:
    """Return (delta_winner, delta_loser) for a decided match."""
    delta_winner = round_half_up(K_FACTOR * (1 - expected_score(rating_winner, rating_loser)))
    delta_loser = round_half_up(K_FACTOR * (0 - expected_score(rating_loser, rating_winner)))
    return delta_winner, delta_loser


def clamp_rating(value: int) -> int:
    return max(MIN_ELO, value)


def calculate_elo_change(player1_elo: int, player2_elo: int, player1_won: bool) -> EloResult:
    """Compute both players' changes and new ratings for one match."""
    if player1_won:
        player1_change, player2_change = rating_change(player1_elo, player2_elo)
    else:
        player2_change, player1_change = rating_change(player2_elo, player1_elo)

    return EloResult(
        new_player1_elo=clamp_rating(player1_elo + player1_change),
        new_player2_elo=clamp_rating(player2_elo + player2_change),
        player1_change=player1_change,
        player2_change=player2_change,
    )


def default_player_stats() -> dict[str, Any]:
    """Starting rating, record and betting balance for a new player."""
    return {
        "elo": DEFAULT_ELO,
        "wins": 0,
        "losses": 0,
        "total_games": 0,
        "bets_placed": 0,
        "bets_won": 0,
        "total_points_earned": 0,
        "betting_pool": STARTING_BETTING_POOL,
    }
