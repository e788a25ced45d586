from datetime import datetime, timezone

from pydantic import Field

from .base import Base
from .bet import Bet
from .match import Match
from .player import Player


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GameData(Base):
    """Persisted document. Older documents may lack any of the lists."""
    players: list[Player] = Field(default_factory=list)
    matches: list[Match] = Field(default_factory=list)
    bets: list[Bet] = Field(default_factory=list)
    last_saved: datetime = Field(default_factory=_utcnow)
