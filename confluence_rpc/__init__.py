"""
confluence_rpc - XML-RPC client for Atlassian Confluence wikis.
"""

__version__ = "1.0.0"

from confluence_rpc.tracing import set_tracing, trace_requested

set_tracing(trace_requested())

from confluence_rpc import marshal
from confluence_rpc.client import Confluence, connect, login
from confluence_rpc.config import ClientConfig, load_config
from confluence_rpc.errors import (
    CallFailure,
    ConfluenceRpcError,
    ErrorCategory,
    LocalPreconditionError,
    RemoteFault,
    TransportError,
    TransportFailure,
    is_failure,
)
from confluence_rpc.session import Session
from confluence_rpc.wire import RemoteValue, WireType

new = login

__all__ = [
    "__version__",
    "CallFailure",
    "ClientConfig",
    "Confluence",
    "ConfluenceRpcError",
    "ErrorCategory",
    "LocalPreconditionError",
    "RemoteFault",
    "RemoteValue",
    "Session",
    "TransportError",
    "TransportFailure",
    "WireType",
    "connect",
    "is_failure",
    "load_config",
    "login",
    "marshal",
    "new",
    "set_tracing",
]
