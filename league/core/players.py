import logging
from datetime import datetime, timezone
from uuid import uuid4

from league.core.rating import clamp_rating, default_player_stats
from league.core.state import AppState
from league.models import BetStatus, MatchStatus, Player

logger = logging.getLogger(__name__)


def create_player(name: str, player_id: str | None = None, now: datetime | None = None) -> Player:
    """Create a player with the default rating, record and betting pool."""
    return Player(
        id=player_id or str(uuid4()),
        name=name,
        created_at=now or datetime.now(timezone.utc),
        **default_player_stats(),
    )


def find_player_by_name(state: AppState, name: str) -> Player | None:
    """Case-insensitive lookup on the trimmed name."""
    wanted = name.strip().lower()
    return next((p for p in state.players.values() if p.name.lower() == wanted), None)


def add_player(state: AppState, name: str, now: datetime | None = None) -> AppState:
    """Add a player unless the name is blank or already taken."""
    player_name = name.strip()
    if not player_name:
        logger.debug("Ignoring blank player name")
        return state

    if find_player_by_name(state, player_name) is not None:
        logger.debug("Player name %r already exists", player_name)
        return state

    player = create_player(player_name, now=now)
    logger.info("Added player %s (%s)", player.name, player.id)
    return state.model_copy(update={"players": {**state.players, player.id: player}})


def record_result(player: Player, won: bool, elo_change: int) -> Player:
    """Apply a match result to a player's rating and record."""
    return player.model_copy(update={
        "elo": clamp_rating(player.elo + elo_change),
        "wins": player.wins + 1 if won else player.wins,
        "losses": player.losses if won else player.losses + 1,
        "total_games": player.total_games + 1,
    })


def remove_player(state: AppState, player_id: str) -> AppState:
    """
    Remove a player and cancel everything left open around them.

    Pending and in-progress matches involving the player are cancelled, as
    are active bets on those matches and active bets the player placed.
    Stakes of cancelled bets go back to bettors still on the roster.
    """
    if player_id not in state.players:
        logger.debug("Ignoring removal of unknown player %s", player_id)
        return state

    cancelled_match_ids = set()
    matches = []
    for match in state.matches:
        if match.involves(player_id) and not match.status.is_terminal:
            match = match.model_copy(update={"status": MatchStatus.CANCELLED})
            cancelled_match_ids.add(match.id)
        matches.append(match)

    players = {pid: p for pid, p in state.players.items() if pid != player_id}
    bets = []
    for bet in state.bets:
        if bet.status is BetStatus.ACTIVE and (
            bet.match_id in cancelled_match_ids or bet.bettor_id == player_id
        ):
            bet = bet.model_copy(update={"status": BetStatus.CANCELLED})
            bettor = players.get(bet.bettor_id)
            if bettor is not None:
                players[bettor.id] = bettor.model_copy(
                    update={"betting_pool": bettor.betting_pool + bet.points}
                )
        bets.append(bet)

    current = state.current_match
    current_match_id = state.current_match_id
    if current is not None and current.involves(player_id):
        current_match_id = None

    logger.info(
        "Removed player %s, cancelled %d match(es)", player_id, len(cancelled_match_ids)
    )
    return state.model_copy(update={
        "players": players,
        "matches": matches,
        "bets": bets,
        "current_match_id": current_match_id,
    })
