"""Native value to XML-RPC wire type conversion.

The Confluence remote API is strict about argument types: a page version
sent as ``<string>`` is rejected, and ids that are Java ``long`` must be sent
as strings. These helpers wrap native values in :class:`RemoteValue` so the
dispatcher serializes each one with the intended type.

Record marshalers take a mapping of field name to native value and never
mutate it.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from loguru import logger

from confluence_rpc.errors import LocalPreconditionError
from confluence_rpc.wire import RemoteValue, WireType

_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0", ""})
# Same layout as XML-RPC dateTime.iso8601, which the server parses back.
ISO8601_FORMAT = "%Y%m%dT%H:%M:%S"

PAGE_INTEGER_FIELDS = frozenset({"version", "locks"})
PAGE_BOOLEAN_FIELDS = frozenset({"current", "homePage"})
PAGE_UPDATE_BOOLEAN_FIELDS = frozenset({"minorEdit"})


def _passthrough(value: Any, kind: WireType) -> RemoteValue | None:
    if isinstance(value, RemoteValue) and value.kind is kind:
        return value
    return None


def integer(value: Any) -> RemoteValue:
    """Wrap as ``<int>``."""
    return _passthrough(value, WireType.INTEGER) or RemoteValue(WireType.INTEGER, int(value))


def long(value: Any) -> RemoteValue:
    """Wrap a Java long; XML-RPC has no 64-bit type so it travels as a string."""
    existing = _passthrough(value, WireType.LONG)
    if existing:
        return existing
    if isinstance(value, str):
        value = value.strip()
    return RemoteValue(WireType.LONG, str(int(value)))


def boolean(value: Any) -> RemoteValue:
    """Wrap as ``<boolean>``.

    Strings are read the way a user would write them ("yes", "false", ...);
    anything else uses Python truthiness.
    """
    existing = _passthrough(value, WireType.BOOLEAN)
    if existing:
        return existing
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return RemoteValue(WireType.BOOLEAN, True)
        if text in _FALSE_STRINGS:
            return RemoteValue(WireType.BOOLEAN, False)
    return RemoteValue(WireType.BOOLEAN, bool(value))


def string(value: Any) -> RemoteValue:
    """Wrap as ``<string>``. ``None`` becomes the empty string."""
    existing = _passthrough(value, WireType.STRING)
    if existing:
        return existing
    if isinstance(value, RemoteValue):
        value = value.value
    if value is None:
        text = ""
    elif isinstance(value, (bytes, bytearray)):
        text = bytes(value).decode("utf-8")
    elif isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, datetime):
        text = value.strftime(ISO8601_FORMAT)
    else:
        text = str(value)
    logger.debug(f"String: {text[:80]}")
    return RemoteValue(WireType.STRING, text)


def base64(value: Any) -> RemoteValue:
    """Wrap raw bytes as ``<base64>``; text is UTF-8 encoded first."""
    existing = _passthrough(value, WireType.BASE64)
    if existing:
        return existing
    if isinstance(value, str):
        data = value.encode("utf-8")
    else:
        data = bytes(value)
    logger.debug(f"Base64 value - {len(data)} bytes")
    return RemoteValue(WireType.BASE64, data)


def _record(name: str, value: Any, field_type) -> RemoteValue:
    existing = _passthrough(value, WireType.STRUCT)
    if existing:
        return existing
    if not isinstance(value, Mapping):
        logger.warning(f"Passed a non-mapping to the {name} marshaler: {type(value).__name__}")
        raise LocalPreconditionError(
            f"{name} record must be a mapping of field name to value, got {type(value).__name__}",
            argument=name,
        )
    logger.debug(f"{name.capitalize()} struct")
    fields = {str(field): field_type(str(field))(item) for field, item in value.items()}
    return RemoteValue(WireType.STRUCT, fields)


def space(value: Mapping[str, Any]) -> RemoteValue:
    """Marshal a Space record; every field is sent as a string."""
    return _record("space", value, lambda field: string)


def page(value: Mapping[str, Any]) -> RemoteValue:
    """Marshal a Page record.

    ``version`` and ``locks`` are integers, ``current`` and ``homePage`` are
    booleans, every other field is a string.
    """

    def field_type(field: str):
        if field in PAGE_INTEGER_FIELDS:
            return integer
        if field in PAGE_BOOLEAN_FIELDS:
            return boolean
        return string

    return _record("page", value, field_type)


def attachment(value: Mapping[str, Any]) -> RemoteValue:
    """Marshal an Attachment record; every field is sent as a string."""
    return _record("attachment", value, lambda field: string)


def page_update_options(value: Mapping[str, Any]) -> RemoteValue:
    """Marshal a PageUpdateOptions record (``versionComment``, ``minorEdit``)."""
    return _record(
        "page update options",
        value,
        lambda field: boolean if field in PAGE_UPDATE_BOOLEAN_FIELDS else string,
    )
