"""
Pydantic v2 domain models for the Live Scoreboard.
Every model is frozen: the registry swaps whole instances instead of mutating them,
so any Match handed to a caller is a stable snapshot.
"""
from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ── Base ────────────────────────────────────────────────────────────────
class DomainModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ── Identity ────────────────────────────────────────────────────────────
class MatchKey(DomainModel):
    """Ordered (home, away) pair identifying an active match. (A, B) != (B, A)."""
    home_team: StrictStr = Field(min_length=1)
    away_team: StrictStr = Field(min_length=1)

    def as_tuple(self) -> tuple[str, str]:
        return (self.home_team, self.away_team)


# ── Score ───────────────────────────────────────────────────────────────
class Score(DomainModel):
    home: StrictInt = Field(default=0, ge=0)
    away: StrictInt = Field(default=0, ge=0)

    @property
    def total(self) -> int:
        return self.home + self.away

    def as_tuple(self) -> tuple[int, int]:
        return (self.home, self.away)


# ── Match ───────────────────────────────────────────────────────────────
class Match(DomainModel):
    """One active contest as held by the registry."""
    home_team: StrictStr
    away_team: StrictStr
    home_score: StrictInt = Field(default=0, ge=0)
    away_score: StrictInt = Field(default=0, ge=0)
    # Registry-issued sequence; the only ordering key, wall clock can collide.
    created_seq: StrictInt = Field(ge=0)
    started_at: datetime = Field(default_factory=_utcnow)

    @classmethod
    def start(cls, key: MatchKey, created_seq: int) -> "Match":
        return cls(home_team=key.home_team, away_team=key.away_team, created_seq=created_seq)

    @property
    def key(self) -> MatchKey:
        return MatchKey(home_team=self.home_team, away_team=self.away_team)

    @property
    def score(self) -> Score:
        return Score(home=self.home_score, away=self.away_score)

    @property
    def total_score(self) -> int:
        return self.home_score + self.away_score

    @property
    def summary_line(self) -> str:
        return f"{self.home_team} {self.home_score} - {self.away_team} {self.away_score}"

    def with_score(self, score: Score) -> "Match":
        """Return a copy carrying both new scores; identity and creation fields are kept."""
        return self.model_copy(update={"home_score": score.home, "away_score": score.away})
