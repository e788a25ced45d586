from datetime import datetime
from enum import Enum
from typing import Optional

from .base import Base
from .player import Player


class MatchStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (MatchStatus.COMPLETED, MatchStatus.CANCELLED)


class EloChanges(Base):
    player1_change: int
    player2_change: int


class Match(Base):
    id: str
    # Snapshots taken when the match was created, not live roster entries
    player1: Player
    player2: Player
    status: MatchStatus = MatchStatus.PENDING
    winner: Optional[Player] = None
    loser: Optional[Player] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    elo_changes: Optional[EloChanges] = None

    def involves(self, player_id: str) -> bool:
        return player_id in (self.player1.id, self.player2.id)
