from pydantic import BaseModel, Field

from league.models import Player


class CreatePlayerRequest(BaseModel):
    name: str = Field(..., min_length=1)


class LeaderboardEntry(BaseModel):
    rank: int
    player: Player
    win_rate: float
