"""Minimal structured logging helper.

Emits one ``key=value`` line per event (or a compact JSON object when
``DUNGEON_LOG_JSON`` is truthy) with a timestamp, level and logger name.
Threshold comes from ``DUNGEON_LOG_LEVEL`` (debug/info/warn/error, default
info).

Usage:
    from .logging_utils import get_logger
    log = get_logger("irregular_dungeon.generator")
    log.info(event="generation_complete", shape="cross", attempts=1)

Fields whose value is None are dropped. Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Dict

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


def _env_level() -> int:
    return LEVELS.get(os.getenv("DUNGEON_LOG_LEVEL", "info").lower(), LEVELS["info"])


def _env_json() -> bool:
    return os.getenv("DUNGEON_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")


def format_record(level: str, name: str, json_mode: bool = False, **fields) -> str:
    fields = {k: v for k, v in fields.items() if v is not None}
    ts = int(time.time())
    if json_mode:
        rec = dict(fields, level=level, ts=ts, logger=name)
        try:
            return json.dumps(rec, separators=(",", ":"), default=str)
        except (TypeError, ValueError):
            return json.dumps({"level": level, "ts": ts, "logger": name, "error": "json_encode_failed"})
    parts = [f"level={level}", f"ts={ts}", f"logger={name}"]
    for k, v in fields.items():
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            v = str(v).replace(" ", "_")
        parts.append(f"{k}={v}")
    return " ".join(parts)


class StructuredLogger:
    def __init__(self, name: str):
        self.name = name
        self.level = _env_level()
        self.json_mode = _env_json()

    def enabled_for(self, lvl: str) -> bool:
        return LEVELS[lvl] >= self.level

    def _log(self, lvl: str, **fields) -> None:
        if not self.enabled_for(lvl):
            return
        stream = sys.stderr if lvl == "error" else sys.stdout
        print(format_record(lvl, self.name, self.json_mode, **fields), file=stream)

    def debug(self, **fields) -> None:
        self._log("debug", **fields)

    def info(self, **fields) -> None:
        self._log("info", **fields)

    def warn(self, **fields) -> None:
        self._log("warn", **fields)

    def error(self, **fields) -> None:
        self._log("error", **fields)


_LOGGER_CACHE: Dict[str, StructuredLogger] = {}


def get_logger(name: str) -> StructuredLogger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = StructuredLogger(name)
    return _LOGGER_CACHE[name]


def reconfigure() -> None:
    """Re-read DUNGEON_LOG_LEVEL / DUNGEON_LOG_JSON for every cached logger."""
    for logger in _LOGGER_CACHE.values():
        logger.level = _env_level()
        logger.json_mode = _env_json()


__all__ = ["LEVELS", "StructuredLogger", "format_record", "get_logger", "reconfigure"]
