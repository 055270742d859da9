"""XML-RPC over HTTP using httpx.

``xmlrpc.client`` does the (de)serialization; this module only moves request
bodies and turns HTTP/network problems into :class:`TransportError`.
Server faults are raised as ``xmlrpc.client.Fault``.
"""

from __future__ import annotations

import xmlrpc.client
from typing import Any
from xml.parsers.expat import ExpatError

import httpx
from loguru import logger

from confluence_rpc import __version__
from confluence_rpc.config.schema import DEFAULT_ENCODING, DEFAULT_TIMEOUT
from confluence_rpc.errors import TransportError

DEFAULT_USER_AGENT = f"confluence-rpc/{__version__}"


class XmlRpcTransport:
    """Blocking XML-RPC transport bound to one endpoint URL."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        verify: bool = True,
        user_agent: str | None = None,
        client: httpx.Client | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout,
            verify=verify,
            headers={"User-Agent": user_agent or DEFAULT_USER_AGENT},
        )

    def request(self, method: str, params: tuple[Any, ...], *, encoding: str = DEFAULT_ENCODING) -> Any:
        """Invoke ``method`` with ``params`` and return the decoded response value."""
        body = xmlrpc.client.dumps(params, methodname=method, encoding=encoding)
        payload = body.encode(encoding, "xmlcharrefreplace")
        try:
            resp = self._client.post(
                self.url,
                content=payload,
                headers={"Content-Type": f"text/xml; charset={encoding}"},
            )
        except httpx.TimeoutException as exc:
            raise TransportError(f"timeout after {self.timeout}s calling {method}") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"network error calling {method}: {exc}") from exc

        if resp.status_code != 200:
            raise TransportError(
                f"HTTP {resp.status_code} {resp.reason_phrase} from {self.url}",
                status_code=resp.status_code,
            )

        return self._parse_response(method, resp.content)

    @staticmethod
    def _parse_response(method: str, content: bytes) -> Any:
        parser, unmarshaller = xmlrpc.client.getparser(use_datetime=True)
        try:
            parser.feed(content)
            parser.close()
            values = unmarshaller.close()
        except xmlrpc.client.Fault:
            raise
        except (ExpatError, xmlrpc.client.ResponseError, ValueError, TypeError, OverflowError) as exc:
            logger.debug(f"Unparsable response body for {method}: {content[:200]!r}")
            raise TransportError(f"bad XML-RPC response for {method}: {exc}") from exc
        if len(values) == 1:
            return values[0]
        return values

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
