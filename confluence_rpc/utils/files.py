"""Local argument and file checks for upload-style calls."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from loguru import logger

from confluence_rpc.errors import LocalPreconditionError


def require_argument(value: Any, name: str) -> Any:
    """Return ``value`` or raise if it is missing (falsy, or a blank string)."""
    if isinstance(value, (str, bytes)):
        missing = not value.strip()
    else:
        missing = not value
    if missing:
        raise LocalPreconditionError(f"Fatal: You must supply a {name}", argument=name)
    return value


def read_upload(path: str | os.PathLike[str] | None, *, argument: str = "file name") -> tuple[str, bytes]:
    """Read a whole local file in binary mode.

    Returns ``(basename, contents)``. The file is buffered into memory in one
    piece since XML-RPC base64 values cannot be streamed.
    """
    if path is None or not str(path).strip():
        raise LocalPreconditionError("Fatal: You must specify a file name", argument=argument)
    file_path = Path(path).expanduser()
    try:
        with open(file_path, "rb") as f:
            data = f.read()
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise LocalPreconditionError(
            f"Fatal: Failed to open {file_path}, {reason}",
            code="FILE_UNREADABLE",
            argument=argument,
        ) from exc
    logger.debug(f"Read {len(data)} bytes from {file_path}")
    return file_path.name, data
