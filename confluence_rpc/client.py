"""Confluence client construction and login."""

from __future__ import annotations

import xmlrpc.client
from typing import Any
from urllib.parse import urlparse

from loguru import logger

from confluence_rpc.config.loader import load_config
from confluence_rpc.config.schema import ClientConfig
from confluence_rpc.errors import TransportError, sanitize_error_message
from confluence_rpc.methods import AdminMethods, AttachmentMethods, PageMethods, SpaceMethods
from confluence_rpc.session import Session
from confluence_rpc.tracing import set_tracing
from confluence_rpc.transport import XmlRpcTransport


class Confluence(SpaceMethods, PageMethods, AttachmentMethods, AdminMethods, Session):
    """Session plus typed wrappers for the Confluence 3.x remote API.

    Methods without a wrapper are reachable through :meth:`Session.call`::

        wiki = login("https://wiki.example.com/rpc/xmlrpc", "jdoe", "secret")
        pages = wiki.call("getPages", "DOC")
    """


def _valid_url(url: str | None) -> bool:
    if not url:
        return False
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def login(
    url: str,
    username: str | None = None,
    password: str | None = None,
    api_version: str | None = None,
    *,
    config: ClientConfig | None = None,
    transport: Any = None,
) -> Confluence | None:
    """
    Connect to a Confluence XML-RPC endpoint.

    Without a username the session is anonymous and no remote call is made.
    With one, ``<api_version>.login`` is called and its result becomes the
    session token.

    Returns:
        A Confluence session, or None if the URL is unusable or the login
        was rejected or could not be sent.
    """
    cfg = config or ClientConfig(url=url or "")
    if cfg.trace:
        set_tracing(True)
    version = api_version or cfg.api_version
    if api_version:
        logger.debug(f"Setting API version to {api_version}")

    if not _valid_url(url):
        logger.warning(f"Failed to connect to wiki: unusable URL {sanitize_error_message(str(url))!r}")
        return None

    owns_transport = transport is None
    if owns_transport:
        logger.debug(f"Creating client connection to {sanitize_error_message(url)}")
        transport = XmlRpcTransport(
            url,
            timeout=cfg.timeout,
            verify=cfg.verify_ssl,
            user_agent=cfg.user_agent or None,
        )

    token = ""
    if username:
        logger.debug(f"Logging in {username}")
        reason = None
        try:
            res = transport.request(f"{version}.login", (username, password or ""), encoding=cfg.encoding)
        except xmlrpc.client.Fault as fault:
            reason = fault.faultString
        except TransportError as exc:
            reason = exc.message
        else:
            if isinstance(res, dict):
                reason = res.get("faultString") or "login returned a structure instead of a token"
            elif not res:
                reason = "login returned an empty token"
            else:
                token = str(res)
        if reason is not None:
            logger.warning(f"Failed to connect to wiki: {sanitize_error_message(str(reason))}")
            if owns_transport:
                transport.close()
            return None
    else:
        logger.debug("No login credentials provided, attempting anonymous access")

    return Confluence(
        url,
        token,
        api_version=version,
        encoding=cfg.encoding,
        transport=transport,
        config=cfg,
    )


def connect(config: ClientConfig | None = None, **overrides: Any) -> Confluence | None:
    """Log in with URL and credentials taken from configuration.

    ``overrides`` (url, username, password, api_version, ...) replace values
    loaded from the config file and ``CONF_*`` environment variables.
    """
    cfg = config or load_config(**overrides)
    return login(cfg.url, cfg.username or None, cfg.password or None, cfg.api_version, config=cfg)
