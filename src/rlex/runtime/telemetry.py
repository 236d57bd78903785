"""Cursor telemetry on top of telelog.

The cursor never logs while stepping or peeking. It reports two things only:
usage errors, as ``event::cursor.<ErrorName>`` records, and explicit
``Cursor.trace()`` calls. Console output is off unless ``RLEX_CONSOLE`` is
set, so lexers that treat a missing mark as ordinary control flow stay quiet.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "RLEX_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "rlex")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class CursorEvent:
    """Fields attached to every cursor record."""

    operation: str
    position: Optional[int] = None
    target: Optional[int] = None
    detail: str = ""

    def pairs(self) -> list[tuple[str, str]]:
        values = {
            "operation": self.operation,
            "position": self.position,
            "target": self.target,
            "detail": self.detail,
        }
        return [
            (key, str(value))
            for key, value in values.items()
            if value not in (None, "")
        ]


def _build_config(preset: Optional[str] = None) -> Any:
    config = tl.Config()
    key = (preset or "default").lower()
    log_file = _env("LOG_FILE")

    if key == "default":
        config.with_min_level((_env("LOG_LEVEL") or "WARNING").upper())
        console = _env_flag("CONSOLE", False)
        config.with_console_output(console)
        if console:
            config.with_colored_output(not _env_flag("NO_COLOR", False))
        if _env_flag("LOG_JSON", False):
            config.with_json_format(True)
    elif key == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
    elif key == "performance":
        config.with_min_level("DEBUG")
        config.with_console_output(False)
        config.with_json_format(True)
        config.with_buffering(True)
        config.with_profiling(True)
        log_file = log_file or "rlex-performance.log"
    else:
        raise ValueError(f"Unknown preset '{preset}'.")

    if log_file:
        config.with_file_output(log_file)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the telelog configuration used by every rlex logger.

    ``preset`` is ``"development"`` (debug to the console) or
    ``"performance"`` (JSON with profiling, to a file). With neither argument
    the ``RLEX_*`` environment variables are read again.
    """

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")
    _ACTIVE_CONFIG = config if config is not None else _build_config(preset)
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    global _ACTIVE_CONFIG
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        if _ACTIVE_CONFIG is None:
            _ACTIVE_CONFIG = _build_config()
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(
            logger_name, _ACTIVE_CONFIG
        )
    return _LOGGER_CACHE[logger_name]


def _level_method(logger: Any, level: str) -> Tuple[Any, bool]:
    name = level.lower()
    with_data = getattr(logger, f"{name}_with", None)
    if with_data is not None:
        return with_data, True
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def record_event(
    name: str,
    event: CursorEvent,
    *,
    level: str = "info",
    logger_name: Optional[str] = None,
) -> None:
    """Write ``event::<name>`` with the event's fields as structured data."""

    method, accepts_data = _level_method(get_logger(logger_name), level)
    message = f"event::{name}"
    if accepts_data:
        method(message, event.pairs())
    else:
        method(f"{message} {dict(event.pairs())}")


@contextmanager
def span(operation: str, *, logger_name: Optional[str] = None) -> Iterator[None]:
    """Profile a cursor operation as ``cursor::<operation>``."""

    with get_logger(logger_name).profile(f"cursor::{operation}"):
        yield


__all__ = [
    "CursorEvent",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
