from typing import Optional

from pydantic import BaseModel

from league.models import Match


class CreateMatchRequest(BaseModel):
    player1_id: str
    player2_id: str


class CompleteMatchRequest(BaseModel):
    winner_id: str


class CurrentMatchResponse(BaseModel):
    match: Optional[Match] = None
    betting_time_left: int = 0


class MatchPreviewResponse(BaseModel):
    player1_win_probability: float
    player2_win_probability: float
    odds: float
