"""
Exception hierarchy and failure results for confluence_rpc.

Provides:
- A base exception carrying an error code and category
- LocalPreconditionError for arguments that must be present before any call
- CallFailure strings returned in place of a remote result
- Safe message formatting for logs (no passwords or tokens)
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Error categories for classification."""
    REMOTE = "remote"
    TRANSPORT = "transport"
    PRECONDITION = "precondition"


class ConfluenceRpcError(Exception):
    """Base exception for all confluence_rpc errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.TRANSPORT,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class LocalPreconditionError(ConfluenceRpcError):
    """A required local argument is missing or a local file cannot be read.

    Always raised before any remote call is attempted.
    """

    def __init__(self, message: str, code: str = "MISSING_ARGUMENT", argument: str | None = None):
        details = {"argument": argument} if argument else {}
        super().__init__(message, code=code, category=ErrorCategory.PRECONDITION, details=details)


class TransportError(ConfluenceRpcError):
    """HTTP or network level failure while talking to the XML-RPC endpoint."""

    def __init__(self, message: str, status_code: int | None = None):
        details = {"status_code": status_code} if status_code is not None else {}
        super().__init__(message, code="TRANSPORT_ERROR", category=ErrorCategory.TRANSPORT, details=details)
        self.status_code = status_code


class CallFailure(str):
    """A failed call result.

    The value is exactly the failure message, so a failure compares equal to
    its text. Use ``isinstance`` or :func:`is_failure` to tell it apart from
    a string returned by the server.
    """

    category = ErrorCategory.TRANSPORT

    @property
    def message(self) -> str:
        return str.__str__(self)


class RemoteFault(CallFailure):
    """The server answered with a fault structure."""

    category = ErrorCategory.REMOTE

    def __new__(cls, message: str, code: int | None = None):
        obj = super().__new__(cls, message)
        obj.code = code
        return obj


class TransportFailure(CallFailure):
    """The request never produced a response value."""

    category = ErrorCategory.TRANSPORT


def is_failure(result: Any) -> bool:
    """Return True when a call result signals a fault or transport failure."""
    return isinstance(result, CallFailure)


_SENSITIVE_PATTERNS = [
    re.compile(r"(token|secret|password|auth)[=:]\s*['\"]?([^\s'\"]+)['\"]?", re.IGNORECASE),
    re.compile(r"bearer\s+[a-zA-Z0-9\-._~+/]+=*", re.IGNORECASE),
    re.compile(r"(https?://)[^/@\s:]+:[^/@\s]+@", re.IGNORECASE),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove credentials from messages before they are logged."""
    sanitized = _SENSITIVE_PATTERNS[0].sub(lambda m: f"{m.group(1)}={replacement}", message)
    sanitized = _SENSITIVE_PATTERNS[1].sub(replacement, sanitized)
    sanitized = _SENSITIVE_PATTERNS[2].sub(lambda m: f"{m.group(1)}{replacement}@", sanitized)
    return sanitized
