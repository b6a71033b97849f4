"""
Live Scoreboard: an in-memory registry of matches in progress with a
summary ordered by total score and start order.
"""
from scoreboard.errors import DuplicateMatch, InvalidInput, MatchNotFound, ScoreboardError
from scoreboard.registry import MatchRegistry

__all__ = [
    "DuplicateMatch",
    "InvalidInput",
    "MatchNotFound",
    "MatchRegistry",
    "ScoreboardError",
]
