"""
In-memory registry of matches currently in progress.

The registry is the sole owner of its matches:
- Matches are keyed by a structured (home_team, away_team) pair, never a joined string.
- Every stored Match is frozen; updates swap in a new instance, so snapshots
  handed to callers never change underneath them.
- Creation order comes from a per-registry sequence counter, which breaks
  summary ties deterministically even when matches start in the same instant.
- One re-entrant lock serializes all operations, so an instance may be shared
  between threads.
"""
from __future__ import annotations

import itertools
import threading
from contextlib import nullcontext
from typing import Any, Optional

from pydantic import ValidationError

from shared.config import Settings, get_settings
from shared.models.domain import Match, MatchKey, Score
from shared.models.enums import DuplicateStartPolicy, Operation, Outcome
from shared.utils.logging import get_logger
from shared.utils.metrics import SB_ACTIVE_MATCHES, SB_SUMMARY_LATENCY, record_operation, track_latency

from scoreboard.errors import DuplicateMatch, InvalidInput, MatchNotFound

logger = get_logger(__name__)


def _summary_order(match: Match) -> tuple[int, int]:
    # Highest total first; equal totals keep creation order.
    return (-match.total_score, match.created_seq)


class MatchRegistry:
    """Live scoreboard: start, update, finish and summarize matches in progress."""

    def __init__(
        self,
        duplicate_policy: DuplicateStartPolicy | str | None = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        if duplicate_policy is None:
            self._duplicate_policy = self._settings.duplicate_start
        else:
            self._duplicate_policy = DuplicateStartPolicy(duplicate_policy)
        self._matches: dict[MatchKey, Match] = {}
        self._sequence = itertools.count()
        self._lock = threading.RLock()

    @property
    def duplicate_policy(self) -> DuplicateStartPolicy:
        return self._duplicate_policy

    # ── Lifecycle ───────────────────────────────────────────────────────

    def start_game(self, home_team: str, away_team: str) -> Match:
        """
        Put a new 0-0 match on the board.

        Raises:
            InvalidInput: either team identifier is missing or blank.
            DuplicateMatch: the pair is already active and the policy is REJECT.
        """
        with self._lock:
            key = self._key(Operation.START, home_team, away_team)
            existing = self._matches.pop(key, None) if self._duplicate_policy.replaces_existing else None
            if key in self._matches:
                self._reject(Operation.START, Outcome.DUPLICATE, home_team=key.home_team, away_team=key.away_team)
                raise DuplicateMatch(key.home_team, key.away_team)

            match = Match.start(key, next(self._sequence))
            self._matches[key] = match

            if existing is None:
                self._gauge(+1)
                logger.info(
                    "match_started",
                    home_team=key.home_team,
                    away_team=key.away_team,
                    created_seq=match.created_seq,
                )
            else:
                logger.warning(
                    "match_overwritten",
                    home_team=key.home_team,
                    away_team=key.away_team,
                    discarded_score=f"{existing.home_score}-{existing.away_score}",
                    discarded_seq=existing.created_seq,
                    created_seq=match.created_seq,
                )
            self._record(Operation.START)
            return match

    def finish_game(self, home_team: str, away_team: str) -> Match:
        """Remove a match from the board and return its final state."""
        with self._lock:
            key = self._key(Operation.FINISH, home_team, away_team)
            match = self._matches.pop(key, None)
            if match is None:
                self._reject(Operation.FINISH, Outcome.NOT_FOUND, home_team=key.home_team, away_team=key.away_team)
                raise MatchNotFound(key.home_team, key.away_team)

            self._gauge(-1)
            self._record(Operation.FINISH)
            logger.info(
                "match_finished",
                home_team=key.home_team,
                away_team=key.away_team,
                final_score=f"{match.home_score}-{match.away_score}",
            )
            return match

    def update_score(self, home_team: str, away_team: str, home_score: int, away_score: int) -> Match:
        """
        Replace both scores of an active match at once.

        Any non-negative integer is accepted, including values lower than the
        current ones. Existence is checked before the scores are validated.

        Raises:
            InvalidInput: malformed team identifiers or scores.
            MatchNotFound: the pair has no active match.
        """
        with self._lock:
            key = self._key(Operation.UPDATE, home_team, away_team)
            current = self._matches.get(key)
            if current is None:
                self._reject(Operation.UPDATE, Outcome.NOT_FOUND, home_team=key.home_team, away_team=key.away_team)
                raise MatchNotFound(key.home_team, key.away_team)

            try:
                score = Score(home=home_score, away=away_score)
            except ValidationError as exc:
                self._reject(
                    Operation.UPDATE,
                    Outcome.INVALID_INPUT,
                    home_team=key.home_team,
                    away_team=key.away_team,
                    home_score=home_score,
                    away_score=away_score,
                )
                raise InvalidInput("invalid score", home_score=home_score, away_score=away_score) from exc

            updated = current.with_score(score)
            self._matches[key] = updated
            self._record(Operation.UPDATE)
            logger.info(
                "score_updated",
                home_team=key.home_team,
                away_team=key.away_team,
                score=f"{score.home}-{score.away}",
                previous=f"{current.home_score}-{current.away_score}",
            )
            return updated

    # ── Reads ───────────────────────────────────────────────────────────

    def get_score(self, home_team: str, away_team: str) -> tuple[int, int]:
        """Return (home_score, away_score) for an active match."""
        return self.get_match(home_team, away_team).score.as_tuple()

    def get_match(self, home_team: str, away_team: str) -> Match:
        with self._lock:
            key = self._key(Operation.GET_SCORE, home_team, away_team)
            match = self._matches.get(key)
            if match is None:
                self._reject(Operation.GET_SCORE, Outcome.NOT_FOUND, home_team=key.home_team, away_team=key.away_team)
                raise MatchNotFound(key.home_team, key.away_team)
            self._record(Operation.GET_SCORE)
            return match

    def matches(self) -> list[Match]:
        """Snapshot of all active matches in summary order."""
        with self._lock:
            return sorted(self._matches.values(), key=_summary_order)

    def get_summary(self) -> list[str]:
        """
        Formatted lines for every active match, highest total score first.
        Ties go to the match that started earlier. The returned list is a
        snapshot and is not affected by later changes.
        """
        timer = track_latency(SB_SUMMARY_LATENCY) if self._settings.metrics_enabled else nullcontext()
        with timer:
            lines = [match.summary_line for match in self.matches()]
        self._record(Operation.SUMMARY)
        return lines

    def clear(self) -> None:
        """Drop every active match."""
        with self._lock:
            removed = len(self._matches)
            self._matches.clear()
            self._gauge(-removed)
            logger.info("scoreboard_cleared", removed=removed)

    def __len__(self) -> int:
        with self._lock:
            return len(self._matches)

    def __contains__(self, pair: object) -> bool:
        if isinstance(pair, MatchKey):
            key = pair
        elif isinstance(pair, tuple) and len(pair) == 2:
            try:
                key = MatchKey(home_team=pair[0], away_team=pair[1])
            except ValidationError:
                return False
        else:
            return False
        with self._lock:
            return key in self._matches

    # ── Helpers ─────────────────────────────────────────────────────────

    def _key(self, operation: Operation, home_team: Any, away_team: Any) -> MatchKey:
        try:
            return MatchKey(home_team=home_team, away_team=away_team)
        except ValidationError as exc:
            self._reject(operation, Outcome.INVALID_INPUT, home_team=home_team, away_team=away_team)
            raise InvalidInput("invalid teams", home_team=home_team, away_team=away_team) from exc

    def _reject(self, operation: Operation, outcome: Outcome, **context: Any) -> None:
        self._record(operation, outcome)
        logger.warning(f"{operation.value}_rejected", reason=outcome.value, **context)

    def _record(self, operation: Operation, outcome: Outcome = Outcome.OK) -> None:
        if self._settings.metrics_enabled:
            record_operation(operation, outcome)

    def _gauge(self, delta: int) -> None:
        if not self._settings.metrics_enabled:
            return
        if delta > 0:
            SB_ACTIVE_MATCHES.inc(delta)
        elif delta < 0:
            SB_ACTIVE_MATCHES.dec(-delta)
