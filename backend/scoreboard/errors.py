"""Scoreboard exception hierarchy.

Every rejected registry operation raises one of these and leaves the
registry untouched.
"""
from __future__ import annotations

from typing import Any


class ScoreboardError(Exception):
    """Base for all scoreboard errors."""

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"{self.message} ({details})"


class InvalidInput(ScoreboardError, ValueError):  # noqa: N818
    """Missing or malformed team identifier, or a score that is not a non-negative int."""


class MatchNotFound(ScoreboardError, LookupError):  # noqa: N818
    """No active match for the ordered (home, away) pair."""

    def __init__(self, home_team: str, away_team: str) -> None:
        self.home_team = home_team
        self.away_team = away_team
        super().__init__("match not found", home_team=home_team, away_team=away_team)


class DuplicateMatch(ScoreboardError):  # noqa: N818
    """The ordered (home, away) pair already has an active match."""

    def __init__(self, home_team: str, away_team: str) -> None:
        self.home_team = home_team
        self.away_team = away_team
        super().__init__("match already in progress", home_team=home_team, away_team=away_team)
