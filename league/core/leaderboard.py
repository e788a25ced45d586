from league.core.state import AppState
from league.models import Match, MatchStatus, Player


def ranked_players(state: AppState, limit: int | None = None) -> list[Player]:
    """Players by rating, best first."""
    ranked = sorted(state.players.values(), key=lambda p: p.elo, reverse=True)
    return ranked[:limit] if limit is not None else ranked


def win_rate(player: Player) -> float:
    """Percentage of games won, 0 for players without games."""
    if player.total_games == 0:
        return 0.0
    return player.wins / player.total_games * 100


def betting_leaderboard(state: AppState) -> list[Player]:
    """Players who have bet at least once, by total points earned."""
    bettors = [p for p in state.players.values() if p.bets_placed > 0]
    return sorted(bettors, key=lambda p: p.total_points_earned, reverse=True)


def matches_with_status(state: AppState, status: MatchStatus | None = None) -> list[Match]:
    """Matches in creation order, optionally only those in one status."""
    if status is None:
        return list(state.matches)
    return [m for m in state.matches if m.status is status]
