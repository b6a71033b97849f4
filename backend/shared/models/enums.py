"""Domain enumerations for the Live Scoreboard."""
from __future__ import annotations

from enum import Enum


class Environment(str, Enum):
    DEV = "dev"
    STAGING = "staging"
    PRODUCTION = "production"


class DuplicateStartPolicy(str, Enum):
    """What start_game does when the ordered team pair is already active."""
    REJECT = "reject"
    OVERWRITE = "overwrite"

    @property
    def replaces_existing(self) -> bool:
        return self == DuplicateStartPolicy.OVERWRITE


class Operation(str, Enum):
    """Registry operations, used as metric and log labels."""
    START = "start_game"
    FINISH = "finish_game"
    UPDATE = "update_score"
    GET_SCORE = "get_score"
    SUMMARY = "get_summary"


class Outcome(str, Enum):
    OK = "ok"
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
