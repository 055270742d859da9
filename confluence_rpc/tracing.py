"""CONF_TRACE handling.

The package logs through loguru and is silent by default, as libraries
should be. Setting ``CONF_TRACE`` to a non-empty value (or passing
``ClientConfig(trace=True)``) enables every call, its arguments and its
result at DEBUG level.
"""

from __future__ import annotations

import os

from loguru import logger

TRACE_ENV = "CONF_TRACE"
PACKAGE = "confluence_rpc"

_enabled = False


def trace_requested() -> bool:
    value = os.environ.get(TRACE_ENV, "").strip().lower()
    return value not in ("", "0", "false", "no", "off")


def set_tracing(enabled: bool) -> None:
    """Enable or disable loguru records emitted from this package."""
    global _enabled
    _enabled = enabled
    if enabled:
        logger.enable(PACKAGE)
    else:
        logger.disable(PACKAGE)


def tracing_enabled() -> bool:
    return _enabled
