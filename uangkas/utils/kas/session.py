# uangkas/utils/kas/session.py
"""
Konteks sesi login.

Token tidak disimpan global: SessionContext dibuat saat login, dipegang oleh
satu KasSession, lalu disuntikkan ke klien/servis. Logout menghapusnya.
Kedaluwarsa token dicatat (expires_at) tetapi tidak pernah diperiksa.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from uangkas.config.paths import cli_credentials
from uangkas.utils.core.validators import require_fields
from uangkas.utils.kas.client import KasApiClient, KasApiError


class NotAuthenticated(RuntimeError):
    pass


@dataclass(frozen=True)
class SessionContext:
    token: str
    username: str
    role: Optional[str]
    expires_at: datetime

    def client(self, **kwargs) -> KasApiClient:
        return KasApiClient.from_session(self, **kwargs)


class KasSession:
    """Memegang paling banyak satu SessionContext (init saat login, dibuang saat logout)."""

    def __init__(self) -> None:
        self._ctx: Optional[SessionContext] = None

    @property
    def authenticated(self) -> bool:
        return self._ctx is not None

    @property
    def context(self) -> Optional[SessionContext]:
        return self._ctx

    def start(self, ctx: SessionContext) -> None:
        self._ctx = ctx

    def end(self) -> None:
        self._ctx = None

    def require(self) -> SessionContext:
        if self._ctx is None:
            raise NotAuthenticated("Silakan login terlebih dahulu")
        return self._ctx


def login(
    client: KasApiClient,
    username: str,
    password: str,
    *,
    now: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
) -> SessionContext:
    """Validasi form lalu POST /auth/login. KasApiError diteruskan ke pemanggil."""
    require_fields(
        {"username": username, "password": password},
        "username", "password",
        message="Username dan password harus diisi",
    )
    resp = client.login(username.strip(), password)
    ctx = SessionContext(
        token=resp.token,
        username=username.strip(),
        role=resp.role,
        expires_at=now() + timedelta(seconds=resp.expires_in),
    )
    logging.info("Login berhasil: user=%s role=%s", ctx.username, ctx.role)
    return ctx


def logout(session: KasSession, client: Optional[KasApiClient] = None) -> str:
    """
    POST /auth/logout lalu SELALU bersihkan sesi lokal (finally).
    KasApiError tetap dilempar setelah sesi dibersihkan.
    """
    ctx = session.context
    try:
        if ctx is None:
            return "Logged out"
        cli = client or ctx.client()
        msg = cli.logout()
        logging.info("Logout: user=%s (%s)", ctx.username, msg)
        return msg
    except KasApiError:
        logging.warning("Logout di server gagal; sesi lokal tetap dibersihkan")
        raise
    finally:
        session.end()


def client_from_env(client: Optional[KasApiClient] = None) -> KasApiClient:
    """Login script CLI memakai KAS_USERNAME / KAS_PASSWORD; hasilnya klien ber-token."""
    username, password = cli_credentials()
    if not username or not password:
        raise NotAuthenticated("KAS_USERNAME / KAS_PASSWORD belum diatur")
    base = client or KasApiClient()
    ctx = login(base, username, password)
    return KasApiClient.from_session(ctx, base_url=base.base_url, timeout_sec=base.timeout_sec, session=base.http)
