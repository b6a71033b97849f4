"""Unit tests for the pydantic domain models and error hierarchy."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from scoreboard.errors import DuplicateMatch, InvalidInput, MatchNotFound, ScoreboardError
from shared.models.domain import Match, MatchKey, Score
from shared.models.enums import DuplicateStartPolicy


# ── MatchKey ────────────────────────────────────────────────────────────

class TestMatchKey:

    def test_hashable_and_ordered(self) -> None:
        a = MatchKey(home_team="Mexico", away_team="Canada")
        b = MatchKey(home_team="Mexico", away_team="Canada")
        reversed_key = MatchKey(home_team="Canada", away_team="Mexico")
        assert a == b
        assert hash(a) == hash(b)
        assert a != reversed_key
        assert len({a, b, reversed_key}) == 2

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MatchKey(home_team="", away_team="Canada")

    def test_whitespace_kept_verbatim(self) -> None:
        key = MatchKey(home_team="   ", away_team="Canada ")
        assert key.as_tuple() == ("   ", "Canada ")

    def test_non_string_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MatchKey(home_team=7, away_team="Canada")

    def test_frozen(self) -> None:
        key = MatchKey(home_team="Mexico", away_team="Canada")
        with pytest.raises(ValidationError):
            key.home_team = "Spain"  # type: ignore[misc]


# ── Score ───────────────────────────────────────────────────────────────

class TestScore:

    def test_defaults(self) -> None:
        assert Score().as_tuple() == (0, 0)

    def test_total(self) -> None:
        assert Score(home=2, away=3).total == 5

    @pytest.mark.parametrize("value", [-1, 0.5, 1.0, "2", None, False])
    def test_rejects_non_natural(self, value: object) -> None:
        with pytest.raises(ValidationError):
            Score(home=value, away=0)


# ── Match ───────────────────────────────────────────────────────────────

class TestMatch:

    def test_start(self) -> None:
        match = Match.start(MatchKey(home_team="Spain", away_team="Brazil"), created_seq=4)
        assert match.home_score == 0
        assert match.away_score == 0
        assert match.created_seq == 4
        assert match.started_at.tzinfo is not None

    def test_summary_line(self) -> None:
        match = Match(home_team="Spain", away_team="Brazil", home_score=10, away_score=2, created_seq=0)
        assert match.summary_line == "Spain 10 - Brazil 2"
        assert match.total_score == 12

    def test_with_score_returns_new_instance(self) -> None:
        match = Match(home_team="Spain", away_team="Brazil", created_seq=0)
        updated = match.with_score(Score(home=1, away=0))
        assert match.score.as_tuple() == (0, 0)
        assert updated.score.as_tuple() == (1, 0)
        assert updated.created_seq == match.created_seq
        assert updated.key == match.key


# ── Errors / enums ──────────────────────────────────────────────────────

class TestErrors:

    def test_hierarchy(self) -> None:
        assert issubclass(InvalidInput, ValueError)
        assert issubclass(MatchNotFound, LookupError)
        for exc in (InvalidInput, MatchNotFound, DuplicateMatch):
            assert issubclass(exc, ScoreboardError)

    def test_message_includes_context(self) -> None:
        err = MatchNotFound("Mexico", "Canada")
        assert err.message == "match not found"
        assert "home_team='Mexico'" in str(err)
        assert "away_team='Canada'" in str(err)

    def test_message_without_context(self) -> None:
        assert str(ScoreboardError("boom")) == "boom"


def test_duplicate_policy_values() -> None:
    assert DuplicateStartPolicy("reject") is DuplicateStartPolicy.REJECT
    assert DuplicateStartPolicy.OVERWRITE.replaces_existing
    assert not DuplicateStartPolicy.REJECT.replaces_existing
