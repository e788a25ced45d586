"""
Match lifecycle.

    pending --start--> in-progress --complete--> completed
    pending/in-progress --cancel--> cancelled

Completed and cancelled matches are history: any further transition on them
is ignored.
"""

import logging
from datetime import datetime, timezone
from uuid import uuid4

from league.core.betting import settle_bets_for_match
from league.core.players import record_result
from league.core.rating import calculate_elo_change
from league.core.state import AppState, replace_match, replace_players
from league.models import EloChanges, Match, MatchStatus, Player

logger = logging.getLogger(__name__)


def create_match(state: AppState, player1_id: str, player2_id: str) -> AppState:
    """Queue a match between two roster players."""
    player1 = state.get_player(player1_id)
    player2 = state.get_player(player2_id)
    if player1 is None or player2 is None:
        logger.debug("Ignoring match between %s and %s: unknown player", player1_id, player2_id)
        return state

    match = Match(id=str(uuid4()), player1=player1, player2=player2, status=MatchStatus.PENDING)
    logger.info("Created match %s: %s vs %s", match.id, player1.name, player2.name)
    return state.model_copy(update={"matches": [*state.matches, match]})


def start_match(state: AppState, match_id: str, now: datetime | None = None) -> AppState:
    """Put a pending match in progress and make it the current match.

    An already-current match is replaced as current without being touched.
    """
    match = state.find_match(match_id)
    if match is None or match.status is not MatchStatus.PENDING:
        logger.debug("Ignoring start of match %s", match_id)
        return state

    started = match.model_copy(update={
        "status": MatchStatus.IN_PROGRESS,
        "start_time": now or datetime.now(timezone.utc),
    })
    logger.info("Started match %s", match_id)
    return state.model_copy(update={
        "matches": replace_match(state.matches, started),
        "current_match_id": started.id,
    })


def _final_record(snapshot: Player, live: Player) -> Player:
    return snapshot.model_copy(update={
        "elo": live.elo,
        "wins": live.wins,
        "losses": live.losses,
        "total_games": live.total_games,
    })


def complete_match(state: AppState, match_id: str, winner_id: str,
                   now: datetime | None = None) -> AppState:
    """
    Record the result of a live match.

    Ratings are taken from the current roster rather than the match snapshot.
    A winner id matching neither player counts as a win for player 2.
    Bets on the match are settled in the same transition.
    """
    match = state.find_match(match_id)
    if match is None or match.status is not MatchStatus.IN_PROGRESS:
        logger.debug("Ignoring completion of match %s", match_id)
        return state

    player1_won = match.player1.id == winner_id
    winner, loser = (match.player1, match.player2) if player1_won else (match.player2, match.player1)

    live_player1 = state.get_player(match.player1.id) or match.player1
    live_player2 = state.get_player(match.player2.id) or match.player2
    result = calculate_elo_change(live_player1.elo, live_player2.elo, player1_won)

    updated_player1 = record_result(live_player1, player1_won, result.player1_change)
    updated_player2 = record_result(live_player2, not player1_won, result.player2_change)
    updated_winner, updated_loser = (
        (updated_player1, updated_player2) if player1_won else (updated_player2, updated_player1)
    )

    completed = match.model_copy(update={
        "status": MatchStatus.COMPLETED,
        "winner": _final_record(winner, updated_winner),
        "loser": _final_record(loser, updated_loser),
        "end_time": now or datetime.now(timezone.utc),
        "elo_changes": EloChanges(
            player1_change=result.player1_change,
            player2_change=result.player2_change,
        ),
    })

    current_match_id = state.current_match_id
    if current_match_id == match_id:
        current_match_id = None

    logger.info(
        "Completed match %s: %s beat %s (player1 %+d, player2 %+d)",
        match_id, winner.name, loser.name, result.player1_change, result.player2_change,
    )
    state = state.model_copy(update={
        "players": replace_players(state.players, updated_winner, updated_loser),
        "matches": replace_match(state.matches, completed),
        "current_match_id": current_match_id,
    })
    return settle_bets_for_match(state, match_id, winner.id)


def cancel_match(state: AppState, match_id: str) -> AppState:
    """Cancel a match that has not finished. Bets on it are left as they are."""
    match = state.find_match(match_id)
    if match is None or match.status.is_terminal:
        logger.debug("Ignoring cancellation of match %s", match_id)
        return state

    cancelled = match.model_copy(update={"status": MatchStatus.CANCELLED})
    current_match_id = state.current_match_id
    if current_match_id == match_id:
        current_match_id = None

    logger.info("Cancelled match %s", match_id)
    return state.model_copy(update={
        "matches": replace_match(state.matches, cancelled),
        "current_match_id": current_match_id,
    })


def set_current_match(state: AppState, match_id: str | None) -> AppState:
    """Point the current match at a live match, or clear it with None."""
    if match_id is None:
        if state.current_match_id is None:
            return state
        return state.model_copy(update={"current_match_id": None})

    match = state.find_match(match_id)
    if match is None or match.status is not MatchStatus.IN_PROGRESS:
        logger.debug("Ignoring current match %s: not in progress", match_id)
        return state
    if state.current_match_id == match_id:
        return state
    return state.model_copy(update={"current_match_id": match_id})


def rematch(state: AppState, match_id: str, now: datetime | None = None) -> AppState:
    """Create and start a new match between the players of a finished one."""
    match = state.find_match(match_id)
    if match is None or match.status is not MatchStatus.COMPLETED:
        logger.debug("Ignoring rematch of match %s", match_id)
        return state

    created = create_match(state, match.player1.id, match.player2.id)
    if created is state:
        return state
    return start_match(created, created.matches[-1].id, now=now)
