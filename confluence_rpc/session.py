"""Session state, dispatch and the unchecked passthrough.

In the overall architecture: the session is the only stateful object. It is
created once by ``login`` (see :mod:`confluence_rpc.client`) and every wrapper
method ends in :meth:`Session.dispatch`.
"""

from __future__ import annotations

import codecs
import xmlrpc.client
from typing import Any

from loguru import logger

from confluence_rpc import marshal
from confluence_rpc.config.schema import DEFAULT_API_VERSION, DEFAULT_ENCODING, ClientConfig
from confluence_rpc.errors import LocalPreconditionError, RemoteFault, TransportError, TransportFailure
from confluence_rpc.transport import XmlRpcTransport
from confluence_rpc.wire import RemoteValue


class Session:
    """An authenticated (or anonymous) connection to a Confluence XML-RPC API.

    The token is fixed for the lifetime of the session. An empty token means
    anonymous access.
    """

    integer = staticmethod(marshal.integer)
    long = staticmethod(marshal.long)
    boolean = staticmethod(marshal.boolean)
    string = staticmethod(marshal.string)
    base64 = staticmethod(marshal.base64)
    space = staticmethod(marshal.space)
    page = staticmethod(marshal.page)
    attachment = staticmethod(marshal.attachment)
    page_update_options = staticmethod(marshal.page_update_options)

    def __init__(
        self,
        url: str,
        token: str = "",
        *,
        api_version: str | None = None,
        encoding: str | None = None,
        transport: Any = None,
        config: ClientConfig | None = None,
    ):
        self.config = config or ClientConfig(url=url)
        self._url = url
        self._token = token or ""
        self._api_version = api_version or self.config.api_version or DEFAULT_API_VERSION
        self._encoding = encoding or self.config.encoding or DEFAULT_ENCODING
        self._transport = transport or XmlRpcTransport(
            url,
            timeout=self.config.timeout,
            verify=self.config.verify_ssl,
            user_agent=self.config.user_agent or None,
        )

    @property
    def url(self) -> str:
        return self._url

    @property
    def token(self) -> str:
        """Session token returned by login; empty for anonymous sessions."""
        return self._token

    @property
    def anonymous(self) -> bool:
        return not self._token

    def api_version(self, value: str | None = None) -> str:
        """Get, or set and return, the remote method namespace (``confluence1``)."""
        if value:
            logger.debug(f"Setting Confluence API to {value}")
            self._api_version = value
        return self._api_version

    def encoding(self, value: str | None = None) -> str:
        """Get, or set and return, the XML encoding of this session's requests."""
        if value:
            codecs.lookup(value)
            logger.debug(f"Setting xml encoding to {value}")
            self._encoding = value
        return self._encoding

    def dispatch(self, method: str, *args: RemoteValue) -> Any:
        """Call ``<api_version>.<method>`` with the token prepended to ``args``.

        Returns the raw response value on success, a :class:`RemoteFault` if
        the server answered with a fault, or a :class:`TransportFailure` if no
        response value was obtained.
        """
        for position, arg in enumerate(args, start=1):
            if not isinstance(arg, RemoteValue):
                raise TypeError(
                    f"argument {position} of {method} must be a RemoteValue, got {type(arg).__name__}; "
                    "use the marshal helpers or Session.call()"
                )
        remote_method = f"{self._api_version}.{method}"
        logger.debug(f"Method: {remote_method}  {list(args)!r}")
        params = (self._token, *(arg.to_wire() for arg in args))
        try:
            result = self._transport.request(remote_method, params, encoding=self._encoding)
        except xmlrpc.client.Fault as fault:
            logger.error(f"ERROR: {fault.faultString}")
            return RemoteFault(str(fault.faultString), code=fault.faultCode)
        except TransportError as exc:
            logger.error(f"ERROR: {exc.message}")
            return TransportFailure(exc.message)

        logger.debug(f"Result = {_preview(result)}")
        if isinstance(result, dict) and result.get("faultString"):
            logger.error(f"ERROR: {result['faultString']}")
            return RemoteFault(str(result["faultString"]), code=result.get("faultCode"))
        return result

    def call(self, method: str, *args: Any) -> Any:
        """Unchecked passthrough to any remote method.

        Every argument is sent as a string, so this only suits methods whose
        parameters are all strings (``getPages``, ``getSpace``, ``removePage``,
        ...). Methods taking ints, booleans, records or binary data need a
        wrapper method or an explicit :meth:`dispatch` with marshaled values.
        """
        if not method or not str(method).strip():
            raise LocalPreconditionError("Fatal: You must supply a method name", argument="method")
        logger.debug(f"Forwarding {method}")
        return self.dispatch(str(method).strip(), *(marshal.string(arg) for arg in args))

    def logout(self) -> Any:
        """Invalidate the token server-side; anonymous sessions return False."""
        if not self._token:
            return False
        return self.dispatch("logout")

    def close(self) -> None:
        """Release the HTTP connection pool. Does not log out."""
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "anonymous" if self.anonymous else "authenticated"
        return f"<{type(self).__name__} {self._url} {self._api_version} {state}>"


def _preview(value: Any, limit: int = 500) -> str:
    text = repr(value)
    if len(text) > limit:
        return f"{text[:limit]}... ({len(text)} chars)"
    return text
