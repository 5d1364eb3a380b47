from datetime import datetime, timedelta, timezone

import pytest

from uangkas.utils.core.validators import ValidationError
from uangkas.utils.kas import KasApiError, KasSession, NotAuthenticated, client_from_env, login, logout

from conftest import FakeResponse

SEKARANG = datetime(2025, 1, 5, 12, 0, tzinfo=timezone.utc)


def _login_ok():
    return FakeResponse(200, {"token": "abc", "role": "admin", "expires_in": 3600})


def test_login_builds_context_with_expiry(make_client):
    ctx = login(make_client(_login_ok(), token=None), " admin ", "pw", now=lambda: SEKARANG)
    assert (ctx.token, ctx.username, ctx.role) == ("abc", "admin", "admin")
    assert ctx.expires_at == SEKARANG + timedelta(seconds=3600)
    assert ctx.client().token == "abc"


def test_login_validates_before_any_request(make_client):
    cli = make_client(token=None)
    with pytest.raises(ValidationError, match="Username dan password harus diisi"):
        login(cli, "", "pw")
    assert cli.http.calls == []


def test_session_lifecycle(make_client):
    s = KasSession()
    assert not s.authenticated
    with pytest.raises(NotAuthenticated):
        s.require()
    s.start(login(make_client(_login_ok(), token=None), "admin", "pw"))
    assert s.authenticated and s.require().token == "abc"
    s.end()
    assert s.context is None


def test_logout_clears_session_even_when_server_fails(make_client):
    s = KasSession()
    s.start(login(make_client(_login_ok(), token=None), "admin", "pw"))
    with pytest.raises(KasApiError):
        logout(s, make_client(FakeResponse(500, text="error")))
    assert not s.authenticated


def test_logout_returns_server_message(make_client):
    s = KasSession()
    s.start(login(make_client(_login_ok(), token=None), "admin", "pw"))
    assert logout(s, make_client(FakeResponse(200, text="Logged out"))) == "Logged out"
    assert not s.authenticated
    assert logout(s) == "Logged out"


def test_client_from_env(monkeypatch, make_client):
    monkeypatch.setenv("KAS_USERNAME", "admin")
    monkeypatch.setenv("KAS_PASSWORD", "pw")
    base = make_client(_login_ok(), token=None)
    cli = client_from_env(base)
    assert cli.token == "abc"
    assert cli.http is base.http
    assert cli.base_url == "http://kas.test/api"


def test_client_from_env_requires_credentials(monkeypatch):
    monkeypatch.delenv("KAS_USERNAME", raising=False)
    monkeypatch.delenv("KAS_PASSWORD", raising=False)
    with pytest.raises(NotAuthenticated):
        client_from_env()
