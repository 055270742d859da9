"""Loguru helpers for file logging in CLI commands."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

_SINK_IDS: dict[str, int] = {}


def get_log_dir() -> Path:
    return Path.home() / ".confluence_rpc" / "logs"


def ensure_rotating_log_file(name: str, level: str = "DEBUG") -> Path:
    """Ensure a rotating log sink for the given command name."""
    log_path = get_log_dir() / f"{name}.log"
    if name in _SINK_IDS:
        return log_path
    log_path.parent.mkdir(parents=True, exist_ok=True)
    sink_id = logger.add(
        str(log_path),
        level=level,
        rotation="10 MB",
        retention="14 days",
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    _SINK_IDS[name] = sink_id
    return log_path
