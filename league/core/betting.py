"""
Live betting ledger.

Stakes are taken from the bettor's pool when a bet is placed. When the match
completes every active bet on it is settled in one go: winners are paid
round(points * odds), stake included, and losers get nothing back.
"""

import logging
import math
from collections import defaultdict
from datetime import datetime, timezone
from uuid import uuid4

from league.core.rating import round_half_up
from league.core.state import AppState
from league.models import Bet, BetStatus, Match, MatchStatus

logger = logging.getLogger(__name__)

MIN_BET = 10
MAX_BET = 100
BETTING_WINDOW_SECONDS = 30


def calculate_odds(player1_elo: int, player2_elo: int) -> float:
    """Payout multiplier, growing with the rating gap."""
    return 1.5 + abs(player1_elo - player2_elo) / 400


def betting_time_left(match: Match, now: datetime | None = None,
                      window: int = BETTING_WINDOW_SECONDS) -> int:
    """Whole seconds left in the betting window of a live match."""
    if match.status is not MatchStatus.IN_PROGRESS or match.start_time is None:
        return 0
    now = now or datetime.now(timezone.utc)
    elapsed = (now - match.start_time).total_seconds()
    return max(0, window - math.floor(elapsed))


def is_betting_open(match: Match, now: datetime | None = None,
                    window: int = BETTING_WINDOW_SECONDS) -> bool:
    return betting_time_left(match, now, window) > 0


def pool_totals(state: AppState, match_id: str) -> dict[str, int]:
    """Points staked on each participant of a match, cancelled bets excluded."""
    match = state.find_match(match_id)
    if match is None:
        return {}

    totals = {match.player1.id: 0, match.player2.id: 0}
    for bet in state.bets_for_match(match_id):
        if bet.status is not BetStatus.CANCELLED and bet.predicted_winner_id in totals:
            totals[bet.predicted_winner_id] += bet.points
    return totals


def place_bet(
    state: AppState,
    match_id: str,
    bettor_id: str,
    predicted_winner_id: str,
    points: int,
    now: datetime | None = None,
    betting_window: int | None = None,
) -> AppState:
    """Escrow a stake on a live match.

    When ``betting_window`` is given the bet is also refused once that many
    seconds have passed since the match started; otherwise the caller is
    trusted to have closed betting.
    """
    match = state.find_match(match_id)
    if match is None or match.status is not MatchStatus.IN_PROGRESS:
        logger.debug("Ignoring bet on match %s: not in progress", match_id)
        return state

    bettor = state.get_player(bettor_id)
    if bettor is None:
        logger.debug("Ignoring bet from unknown player %s", bettor_id)
        return state

    if not match.involves(predicted_winner_id):
        logger.debug("Ignoring bet on %s, not playing in match %s", predicted_winner_id, match_id)
        return state

    if points < MIN_BET or points > MAX_BET:
        logger.debug("Ignoring bet of %d points: outside %d-%d", points, MIN_BET, MAX_BET)
        return state

    if points > bettor.betting_pool:
        logger.debug("Ignoring bet of %d points: %s has %d", points, bettor_id, bettor.betting_pool)
        return state

    now = now or datetime.now(timezone.utc)
    if betting_window is not None and not is_betting_open(match, now, betting_window):
        logger.debug("Ignoring bet on match %s: betting window closed", match_id)
        return state

    player1 = state.get_player(match.player1.id) or match.player1
    player2 = state.get_player(match.player2.id) or match.player2

    bet = Bet(
        id=str(uuid4()),
        match_id=match_id,
        bettor_id=bettor_id,
        predicted_winner_id=predicted_winner_id,
        points=points,
        odds=calculate_odds(player1.elo, player2.elo),
        status=BetStatus.ACTIVE,
        placed_at=now,
    )
    updated_bettor = bettor.model_copy(update={
        "bets_placed": bettor.bets_placed + 1,
        "betting_pool": bettor.betting_pool - points,
    })

    logger.info("%s bet %d points on %s at %.2f", bettor.name, points, predicted_winner_id, bet.odds)
    return state.model_copy(update={
        "players": {**state.players, bettor_id: updated_bettor},
        "bets": [*state.bets, bet],
    })


def settle_bets_for_match(state: AppState, match_id: str, winner_id: str) -> AppState:
    """Settle every active bet on a match and pay out the winners."""
    won_counts: dict[str, int] = defaultdict(int)
    payouts: dict[str, int] = defaultdict(int)
    bets = []

    for bet in state.bets:
        if bet.match_id == match_id and bet.status is BetStatus.ACTIVE:
            won = bet.predicted_winner_id == winner_id
            earned = round_half_up(bet.points * bet.odds) if won else 0
            bet = bet.model_copy(update={
                "status": BetStatus.WON if won else BetStatus.LOST,
                "points_earned": earned,
            })
            won_counts[bet.bettor_id] += int(won)
            payouts[bet.bettor_id] += earned
        bets.append(bet)

    if not payouts:
        return state

    players = dict(state.players)
    for bettor_id, earned in payouts.items():
        bettor = players.get(bettor_id)
        if bettor is None:
            continue
        players[bettor_id] = bettor.model_copy(update={
            "bets_won": bettor.bets_won + won_counts[bettor_id],
            "total_points_earned": bettor.total_points_earned + earned,
            "betting_pool": bettor.betting_pool + earned,
        })

    logger.info("Settled %d bettor(s) on match %s", len(payouts), match_id)
    return state.model_copy(update={"players": players, "bets": bets})
