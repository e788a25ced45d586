"""
Application aggregate and its persisted form.

AppState is the single owner of every player, match and bet. It is never
mutated in place: each transition builds a new AppState with model_copy.
"""

from datetime import datetime, timezone
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

from league.models import Bet, GameData, Match, MatchStatus, Player


class AppState(BaseModel):
    model_config = ConfigDict(frozen=True)

    players: dict[str, Player] = Field(default_factory=dict)
    matches: list[Match] = Field(default_factory=list)
    bets: list[Bet] = Field(default_factory=list)
    # Back-reference into `matches`, never an owner
    current_match_id: Optional[str] = None

    @property
    def current_match(self) -> Match | None:
        if self.current_match_id is None:
            return None
        return self.find_match(self.current_match_id)

    def get_player(self, player_id: str) -> Player | None:
        return self.players.get(player_id)

    def find_match(self, match_id: str) -> Match | None:
        return next((m for m in self.matches if m.id == match_id), None)

    def bets_for_match(self, match_id: str) -> list[Bet]:
        return [bet for bet in self.bets if bet.match_id == match_id]


def replace_match(matches: Iterable[Match], updated: Match) -> list[Match]:
    return [updated if m.id == updated.id else m for m in matches]


def replace_players(players: dict[str, Player], *updated: Player) -> dict[str, Player]:
    """Copy of the roster with the given players swapped in, order preserved."""
    result = dict(players)
    for player in updated:
        if player.id in result:
            result[player.id] = player
    return result


def dump_state(state: AppState, saved_at: datetime | None = None) -> GameData:
    """Build the persisted document for an aggregate."""
    return GameData(
        players=list(state.players.values()),
        matches=list(state.matches),
        bets=list(state.bets),
        last_saved=saved_at or datetime.now(timezone.utc),
    )


def load_state(game_data: GameData) -> AppState:
    """Rebuild an aggregate from a persisted document.

    The current match is not persisted; it is restored as the most recently
    started match that is still in progress.
    """
    in_progress = [
        m for m in game_data.matches
        if m.status is MatchStatus.IN_PROGRESS and m.start_time is not None
    ]
    current = max(in_progress, key=lambda m: m.start_time, default=None)

    return AppState(
        players={p.id: p for p in game_data.players},
        matches=list(game_data.matches),
        bets=list(game_data.bets),
        current_match_id=current.id if current else None,
    )
