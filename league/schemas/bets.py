from pydantic import BaseModel, Field

from league.core.betting import MAX_BET, MIN_BET


class PlaceBetRequest(BaseModel):
    match_id: str
    bettor_id: str
    predicted_winner_id: str
    points: int = Field(..., ge=MIN_BET, le=MAX_BET)


class PoolTotalsResponse(BaseModel):
    match_id: str
    totals: dict[str, int]
