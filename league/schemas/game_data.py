from typing import Optional

from pydantic import BaseModel


class SaveResponse(BaseModel):
    success: bool
    url: Optional[str] = None
    savedAt: Optional[str] = None


class LoadResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    players: int = 0
    matches: int = 0
    bets: int = 0
