from datetime import datetime

from .base import Base

STARTING_BETTING_POOL = 2500


class Player(Base):
    id: str
    name: str
    elo: int
    wins: int = 0
    losses: int = 0
    total_games: int = 0
    created_at: datetime

    # Betting statistics
    bets_placed: int = 0
    bets_won: int = 0
    total_points_earned: int = 0
    betting_pool: int = STARTING_BETTING_POOL
