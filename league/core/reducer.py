from datetime import datetime

from league.core import betting, matches, players
from league.core.actions import (
    Action,
    AddPlayer,
    CancelMatch,
    CompleteMatch,
    CreateMatch,
    DeletePlayer,
    PlaceBet,
    Rematch,
    SetCurrentMatch,
    StartMatch,
)
from league.core.state import AppState


def reduce(
    state: AppState,
    action: Action,
    now: datetime | None = None,
    betting_window: int | None = None,
) -> AppState:
    """Apply one action and return the resulting aggregate.

    Actions that are invalid or refer to unknown entities return ``state``
    itself, so ``reduce(s, a) is s`` tells the caller nothing happened.
    """
    if isinstance(action, AddPlayer):
        return players.add_player(state, action.name, now=now)
    if isinstance(action, DeletePlayer):
        return players.remove_player(state, action.player_id)
    if isinstance(action, CreateMatch):
        return matches.create_match(state, action.player1_id, action.player2_id)
    if isinstance(action, StartMatch):
        return matches.start_match(state, action.match_id, now=now)
    if isinstance(action, CompleteMatch):
        return matches.complete_match(state, action.match_id, action.winner_id, now=now)
    if isinstance(action, CancelMatch):
        return matches.cancel_match(state, action.match_id)
    if isinstance(action, PlaceBet):
        return betting.place_bet(
            state,
            action.match_id,
            action.bettor_id,
            action.predicted_winner_id,
            action.points,
            now=now,
            betting_window=betting_window,
        )
    if isinstance(action, SetCurrentMatch):
        return matches.set_current_match(state, action.match_id)
    if isinstance(action, Rematch):
        return matches.rematch(state, action.match_id, now=now)
    raise TypeError(f"Unknown action: {action!r}")
