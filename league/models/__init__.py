from .base import Base
from .player import Player
from .match import EloChanges, Match, MatchStatus
from .bet import Bet, BetStatus
from .game_data import GameData

__all__ = [
    'Base',
    'Player',
    'Match',
    'MatchStatus',
    'EloChanges',
    'Bet',
    'BetStatus',
    'GameData',
]
