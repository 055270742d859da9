"""Pytest hooks and fixtures."""

import os

import pytest

from confluence_rpc.client import Confluence
from confluence_rpc.config.schema import ClientConfig
from confluence_rpc.tracing import set_tracing

WIKI_URL = "http://wiki.test/rpc/xmlrpc"


class FakeTransport:
    """Records requests and replays queued responses.

    A queued exception instance is raised instead of returned. With nothing
    queued every call answers True.
    """

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls: list[tuple[str, tuple, str]] = []
        self.closed = False

    def request(self, method, params, *, encoding="utf-8"):
        self.calls.append((method, params, encoding))
        if not self.responses:
            return True
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response

    def close(self):
        self.closed = True

    @property
    def last_params(self):
        return self.calls[-1][1]


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep CONF_* variables of the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("CONF_"):
            monkeypatch.delenv(key, raising=False)
    yield
    set_tracing(False)


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def wiki(transport):
    return Confluence(WIKI_URL, "tok", transport=transport, config=ClientConfig(url=WIKI_URL))
