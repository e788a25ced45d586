import logging
import threading
from datetime import datetime
from typing import NamedTuple

from league.core.actions import Action
from league.core.reducer import reduce
from league.core.state import AppState, dump_state, load_state
from league.models import GameData

logger = logging.getLogger(__name__)


class DispatchResult(NamedTuple):
    state: AppState
    applied: bool


class StateStore:
    """Holds the one authoritative AppState and applies actions one at a time."""

    def __init__(self, state: AppState | None = None, betting_window: int | None = None):
        self._state = state or AppState()
        self.betting_window = betting_window
        self._lock = threading.Lock()

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: Action, now: datetime | None = None) -> DispatchResult:
        with self._lock:
            previous = self._state
            state = reduce(previous, action, now=now, betting_window=self.betting_window)
            self._state = state

        applied = state is not previous
        if not applied:
            logger.debug("Action %s left the state unchanged", action.type)
        return DispatchResult(state, applied)

    def snapshot(self, saved_at: datetime | None = None) -> GameData:
        with self._lock:
            return dump_state(self._state, saved_at)

    def restore(self, game_data: GameData) -> AppState:
        state = load_state(game_data)
        with self._lock:
            self._state = state
        logger.info(
            "Restored %d player(s), %d match(es), %d bet(s)",
            len(state.players), len(state.matches), len(state.bets),
        )
        return state
