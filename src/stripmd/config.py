"""Runtime config for the command line tool.

Values come from environment variables with hard defaults; CLI flags
override them.  The library itself reads no configuration.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

log = structlog.get_logger()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_DEFAULTS: dict[str, Any] = {
    "log_level": "WARNING",
    "trace_events": False,
}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def normalise_log_level(value: str | None) -> str | None:
    """Return *value* as an upper-case level name, or None if unknown."""
    if not value:
        return None
    level = value.strip().upper()
    return level if level in LOG_LEVELS else None


def get_config() -> dict[str, Any]:
    """Read config from the environment. Falls back to defaults."""
    config = dict(_DEFAULTS)

    raw_level = os.getenv("STRIPMD_LOG_LEVEL") or os.getenv("LOG_LEVEL")
    if raw_level:
        level = normalise_log_level(raw_level)
        if level is None:
            log.warning("config_invalid_log_level", value=raw_level,
                        using=_DEFAULTS["log_level"])
        else:
            config["log_level"] = level

    raw_trace = os.getenv("STRIPMD_TRACE")
    if raw_trace is not None:
        flag = raw_trace.strip().lower()
        if flag in _TRUTHY:
            config["trace_events"] = True
        elif flag not in _FALSY:
            log.warning("config_invalid_trace_flag", value=raw_trace,
                        using=_DEFAULTS["trace_events"])

    return config


def configure_logging(level: str) -> None:
    """Route structlog output to stderr, filtered at *level*."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, normalise_log_level(level) or _DEFAULTS["log_level"])
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
