import xmlrpc.client

import pytest

import confluence_rpc
from confluence_rpc import login
from confluence_rpc.client import Confluence, connect
from confluence_rpc.config.schema import ClientConfig
from confluence_rpc.errors import TransportError

from conftest import WIKI_URL, FakeTransport


def test_anonymous_login_makes_no_remote_call() -> None:
    transport = FakeTransport()
    wiki = login(WIKI_URL, transport=transport)
    assert isinstance(wiki, Confluence)
    assert wiki.token == ""
    assert wiki.anonymous is True
    assert transport.calls == []


def test_login_with_credentials_stores_token() -> None:
    transport = FakeTransport("abc123")
    wiki = login(WIKI_URL, "jdoe", "secret", transport=transport)
    assert wiki is not None
    assert wiki.token == "abc123"
    assert wiki.anonymous is False
    assert transport.calls == [("confluence1.login", ("jdoe", "secret"), "utf-8")]


def test_login_fault_structure_yields_no_session() -> None:
    transport = FakeTransport({"faultString": "Invalid username or password", "faultCode": 0})
    assert login(WIKI_URL, "jdoe", "wrong", transport=transport) is None


def test_login_raised_fault_yields_no_session() -> None:
    transport = FakeTransport(xmlrpc.client.Fault(0, "AuthenticationFailedException"))
    assert login(WIKI_URL, "jdoe", "wrong", transport=transport) is None


def test_login_transport_error_yields_no_session() -> None:
    transport = FakeTransport(TransportError("network error calling confluence1.login: boom"))
    assert login(WIKI_URL, "jdoe", "secret", transport=transport) is None


def test_login_empty_token_yields_no_session() -> None:
    assert login(WIKI_URL, "jdoe", "secret", transport=FakeTransport("")) is None


@pytest.mark.parametrize("url", ["", None, "wiki.test/rpc/xmlrpc", "ftp://wiki.test/rpc", "http://"])
def test_login_rejects_unusable_urls(url) -> None:
    transport = FakeTransport("abc")
    assert login(url, "jdoe", "secret", transport=transport) is None
    assert transport.calls == []


def test_login_api_version_override_prefixes_login_call() -> None:
    transport = FakeTransport("abc")
    wiki = login(WIKI_URL, "jdoe", "secret", "confluence2", transport=transport)
    assert transport.calls[0][0] == "confluence2.login"
    assert wiki.api_version() == "confluence2"


def test_login_uses_configured_defaults() -> None:
    transport = FakeTransport("abc")
    cfg = ClientConfig(url=WIKI_URL, api_version="confluence2", encoding="iso-8859-1")
    wiki = login(WIKI_URL, "jdoe", "secret", config=cfg, transport=transport)
    assert transport.calls == [("confluence2.login", ("jdoe", "secret"), "iso-8859-1")]
    assert wiki.encoding() == "iso-8859-1"


def test_new_is_an_alias_for_login() -> None:
    assert confluence_rpc.new is login


def test_token_is_read_only(wiki) -> None:
    with pytest.raises(AttributeError):
        wiki.token = "other"
    assert wiki.token == "tok"


def test_api_version_get_and_set(wiki, transport) -> None:
    assert wiki.api_version() == "confluence1"
    assert wiki.api_version("confluence2") == "confluence2"
    assert wiki.api_version() == "confluence2"
    wiki.get_server_info()
    assert transport.calls[-1][0] == "confluence2.getServerInfo"


def test_encoding_is_per_session() -> None:
    first_transport, second_transport = FakeTransport(), FakeTransport()
    first = Confluence(WIKI_URL, "a", transport=first_transport)
    second = Confluence(WIKI_URL, "b", transport=second_transport)

    assert first.encoding() == "utf-8"
    first.encoding("iso-8859-1")
    first.get_server_info()
    second.get_server_info()

    assert first_transport.calls[-1][2] == "iso-8859-1"
    assert second_transport.calls[-1][2] == "utf-8"
    assert second.encoding() == "utf-8"


def test_encoding_rejects_unknown_codecs(wiki) -> None:
    with pytest.raises(LookupError):
        wiki.encoding("no-such-charset")
    assert wiki.encoding() == "utf-8"


def test_logout_anonymous_returns_false_without_call() -> None:
    transport = FakeTransport()
    wiki = login(WIKI_URL, transport=transport)
    assert wiki.logout() is False
    assert transport.calls == []


def test_logout_sends_token_and_keeps_local_state(wiki, transport) -> None:
    assert wiki.logout() is True
    assert transport.calls == [("confluence1.logout", ("tok",), "utf-8")]
    assert wiki.token == "tok"


def test_context_manager_closes_transport(transport) -> None:
    with Confluence(WIKI_URL, "tok", transport=transport) as wiki:
        wiki.get_server_info()
    assert transport.closed is True


def test_connect_reads_url_and_credentials_from_config(monkeypatch) -> None:
    captured = {}

    def fake_login(url, username=None, password=None, api_version=None, *, config=None, transport=None):
        captured.update(url=url, username=username, password=password, api_version=api_version)
        return "session"

    monkeypatch.setattr("confluence_rpc.client.login", fake_login)
    cfg = ClientConfig(url=WIKI_URL, username="jdoe", password="pw")
    assert connect(cfg) == "session"
    assert captured == {"url": WIKI_URL, "username": "jdoe", "password": "pw", "api_version": "confluence1"}


def test_connect_without_username_is_anonymous(monkeypatch) -> None:
    monkeypatch.setenv("CONF_URL", WIKI_URL)
    monkeypatch.setattr("confluence_rpc.client.load_config", lambda **overrides: ClientConfig(**{
        k: v for k, v in overrides.items() if v is not None
    }))
    wiki = connect()
    assert wiki is not None
    assert wiki.url == WIKI_URL
    assert wiki.anonymous is True
    wiki.close()
