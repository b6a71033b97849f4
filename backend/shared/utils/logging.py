"""
Structured logging for the Live Scoreboard.

The registry logs through structlog with keyword context only:

    match_started        info     home_team, away_team, created_seq
    score_updated        info     home_team, away_team, score, previous
    match_finished       info     home_team, away_team, final_score
    match_overwritten    warning  home_team, away_team, discarded_score, discarded_seq, created_seq
    scoreboard_cleared   info     removed
    <operation>_rejected warning  reason, plus the offending inputs

setup_logging() routes those entries through stdlib logging, rendered for a
console in dev and as JSON lines elsewhere.
"""
from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog
from shared.config import Settings, get_settings
from shared.models.enums import Environment

REGISTRY_EVENTS = frozenset(
    {
        "match_started",
        "score_updated",
        "match_finished",
        "match_overwritten",
        "scoreboard_cleared",
    }
)
REJECTED_SUFFIX = "_rejected"


def is_registry_event(event: str) -> bool:
    return event in REGISTRY_EVENTS or event.endswith(REJECTED_SUFFIX)


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(settings: Settings) -> structlog.types.Processor:
    if settings.environment == Environment.DEV:
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.processors.JSONRenderer()


def setup_logging(
    service_name: str,
    extra_context: dict[str, Any] | None = None,
    settings: Settings | None = None,
    stream: IO[str] | None = None,
) -> None:
    """
    Configure structured logging for the process owning a registry.

    Every entry carries the service name, the environment and the
    duplicate-start policy in force, so overwrite warnings can be told
    apart from rejections when reading logs from several processes.

    Args:
        service_name: Identifier bound to every log entry (e.g. "scoreboard").
        extra_context: Additional static context fields bound to every log entry.
        settings: Explicit settings; defaults to the cached environment settings.
        stream: Output stream; defaults to stdout.
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level, logging.INFO)
    shared_processors = _shared_processors()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings),
            ],
            foreign_pre_chain=shared_processors,
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level)

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        service=service_name,
        environment=settings.environment.value,
        duplicate_start=settings.duplicate_start.value,
        **(extra_context or {}),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a named structured logger."""
    return structlog.get_logger(name)
