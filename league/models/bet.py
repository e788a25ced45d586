from datetime import datetime
from enum import Enum
from typing import Optional

from .base import Base


class BetStatus(str, Enum):
    ACTIVE = "active"
    WON = "won"
    LOST = "lost"
    CANCELLED = "cancelled"


class Bet(Base):
    id: str
    match_id: str
    bettor_id: str
    predicted_winner_id: str
    points: int
    odds: float
    status: BetStatus = BetStatus.ACTIVE
    placed_at: datetime
    # Total payout including the stake
    points_earned: Optional[int] = None
