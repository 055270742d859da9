"""Tagged XML-RPC wire values."""

from __future__ import annotations

import xmlrpc.client
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class WireType(str, Enum):
    """Explicit XML-RPC types the Confluence API expects."""
    INTEGER = "int"
    LONG = "long"  # sent as <string>, Confluence parses it server-side
    BOOLEAN = "boolean"
    BASE64 = "base64"
    STRING = "string"
    STRUCT = "struct"


@dataclass(frozen=True)
class RemoteValue:
    """A native value paired with the wire type it must be sent as.

    Build these with the functions in :mod:`confluence_rpc.marshal`.
    """
    kind: WireType
    value: Any

    def to_wire(self) -> Any:
        """Convert to the value ``xmlrpc.client`` serializes as ``kind``."""
        if self.kind is WireType.INTEGER:
            return int(self.value)
        if self.kind is WireType.BOOLEAN:
            return bool(self.value)
        if self.kind is WireType.BASE64:
            return xmlrpc.client.Binary(bytes(self.value))
        if self.kind is WireType.STRUCT:
            return {name: field.to_wire() for name, field in self.value.items()}
        return str(self.value)

    @property
    def fields(self) -> Mapping[str, "RemoteValue"]:
        """Struct members; empty for scalars."""
        if self.kind is WireType.STRUCT:
            return self.value
        return {}

    def __repr__(self) -> str:
        if self.kind is WireType.BASE64:
            return f"RemoteValue({self.kind.value}, <{len(self.value)} bytes>)"
        return f"RemoteValue({self.kind.value}, {self.value!r})"
