# uangkas/utils/kas/client.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from uangkas.config.paths import API_BASE_URL, API_TIMEOUT_SEC
from uangkas.utils.kas.mappers import (
    invoice_from_api, list_from_api, login_from_api, member_from_api,
    notification_from_api, paginated_from_api, stats_from_api,
)
from uangkas.utils.kas.schema import (
    Invoice, InvoiceStatus, LoginResult, Member, MemberStatus,
    Notification, NotificationStats, PaginatedResponse,
)


class KasApiError(RuntimeError):
    """Request gagal: status non-2xx atau error koneksi (status_code=None)."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: Optional[str] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class KasApiClient:
    """
    Klien REST backend uang kas.

      - semua request kecuali login mengirim `Authorization: Bearer <token>`
      - status non-2xx → KasApiError (status + body)
      - tanpa retry; kegagalan diulang manual oleh pengguna
    """

    def __init__(
        self,
        *,
        base_url: str = API_BASE_URL,
        token: Optional[str] = None,
        timeout_sec: int = API_TIMEOUT_SEC,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout_sec = timeout_sec
        self.http = session or requests.Session()

    # ---------- factories ----------

    @classmethod
    def from_session(cls, ctx, **kwargs: Any) -> "KasApiClient":
        """Klien ber-token dari SessionContext hasil login."""
        return cls(token=ctx.token, **kwargs)

    # ---------- low-level helpers ----------

    def _headers(self, *, auth: bool = True, json_body: bool = True) -> Dict[str, str]:
        h: Dict[str, str] = {}
        if json_body:
            h["Content-Type"] = "application/json"
        if auth and self.token:
            h["Authorization"] = f"Bearer {self.token}"
        return h

    def _request(
        self,
        method: str,
        path: str,
        aksi: str,
        *,
        auth: bool = True,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
        files: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            r = self.http.request(
                method,
                url,
                headers=self._headers(auth=auth, json_body=files is None),
                params=params,
                json=json,
                files=files,
                timeout=self.timeout_sec,
            )
        except requests.RequestException as e:
            logging.exception("KAS %s %s exception: %s", method, url, e)
            raise KasApiError(f"{aksi}: {e}") from e

        if r.status_code >= 400:
            body_preview = (r.text or "")[:1000].replace("\n", " ")
            logging.error("KAS %s failed: %s | %s | %s", method, url, r.status_code, body_preview)
            raise KasApiError(f"{aksi}: {r.status_code}", status_code=r.status_code, body=r.text)
        return r

    @staticmethod
    def _json(r: requests.Response, aksi: str) -> Any:
        if not r.content:
            return {}
        try:
            return r.json()
        except ValueError as e:
            logging.error("KAS respons bukan JSON: %s | %s", r.status_code, (r.text or "")[:200])
            raise KasApiError(f"{aksi}: respons bukan JSON", status_code=r.status_code, body=r.text) from e

    def _list(self, r: requests.Response, aksi: str, item_mapper) -> List[Any]:
        try:
            return list_from_api(self._json(r, aksi), item_mapper)
        except ValueError as e:
            raise KasApiError(f"{aksi}: {e}", status_code=r.status_code, body=r.text) from e

    # ---------- Auth ----------

    def login(self, username: str, password: str) -> LoginResult:
        url = f"{self.base_url}/auth/login"
        try:
            r = self.http.request(
                "POST",
                url,
                headers=self._headers(auth=False),
                json={"username": username, "password": password},
                timeout=self.timeout_sec,
            )
        except requests.RequestException as e:
            logging.exception("KAS login exception: %s", e)
            raise KasApiError(f"Login failed: {e}") from e

        if r.status_code >= 400:
            text = r.text or ""
            logging.warning("Login ditolak (%s) untuk user=%s", r.status_code, username)
            raise KasApiError(
                text or f"Login failed with status {r.status_code}",
                status_code=r.status_code,
                body=text,
            )
        return login_from_api(self._json(r, "Login failed"))

    def logout(self) -> str:
        """Body non-JSON ditoleransi: teks mentah dipakai sebagai pesan."""
        url = f"{self.base_url}/auth/logout"
        try:
            r = self.http.request("POST", url, headers=self._headers(), timeout=self.timeout_sec)
        except requests.RequestException as e:
            logging.exception("KAS logout exception: %s", e)
            raise KasApiError(f"Logout failed: {e}") from e

        raw = r.text or ""
        if r.status_code >= 400:
            raise KasApiError(raw or f"Logout failed with status {r.status_code}",
                              status_code=r.status_code, body=raw)
        try:
            data = r.json()
        except ValueError:
            return raw or "Logged out"
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return raw or "Logged out"

    # ---------- Member ----------

    def list_members(self) -> List[Member]:
        r = self._request("GET", "/members", "Gagal memuat member")
        return self._list(r, "Gagal memuat member", member_from_api)

    def get_member(self, member_id: str) -> Member:
        r = self._request("GET", f"/members/{member_id}", "Gagal memuat member")
        return member_from_api(self._json(r, "Gagal memuat member"))

    def create_member(self, nama: str, no_hp: str, status: MemberStatus | str) -> Member:
        body = {"nama": nama, "noHp": no_hp, "status": MemberStatus(status).value}
        r = self._request("POST", "/members", "Gagal membuat member", json=body)
        return member_from_api(self._json(r, "Gagal membuat member"))

    def update_member(self, member_id: str, nama: str, no_hp: str, status: MemberStatus | str) -> Member:
        body = {"nama": nama, "noHp": no_hp, "status": MemberStatus(status).value}
        r = self._request("PUT", f"/members/{member_id}", "Gagal mengubah member", json=body)
        return member_from_api(self._json(r, "Gagal mengubah member"))

    def delete_member(self, member_id: str) -> Dict[str, Any]:
        r = self._request("DELETE", f"/members/{member_id}", "Gagal menghapus member")
        if not r.content:
            return {}
        try:
            data = r.json()
        except ValueError:
            return {"message": r.text}
        return data if isinstance(data, dict) else {"result": data}

    # ---------- Invoice ----------

    def list_invoices(self) -> List[Invoice]:
        r = self._request("GET", "/invoices", "Gagal memuat invoice")
        return self._list(r, "Gagal memuat invoice", invoice_from_api)

    def get_invoice(self, invoice_id: str) -> Invoice:
        r = self._request("GET", f"/invoices/{invoice_id}", "Gagal memuat invoice")
        return invoice_from_api(self._json(r, "Gagal memuat invoice"))

    def create_invoice(
        self,
        member_id: str,
        member_name: str,
        periode: str,
        amount: int,
        status: InvoiceStatus | str = InvoiceStatus.UNPAID,
    ) -> Invoice:
        body = {
            "memberId": member_id,
            "memberName": member_name,
            "periode": periode,
            "amount": int(amount),
            "status": InvoiceStatus(status).value,
        }
        r = self._request("POST", "/invoices", "Gagal membuat invoice", json=body)
        return invoice_from_api(self._json(r, "Gagal membuat invoice"))

    def approve_invoice(self, invoice_id: str) -> Invoice:
        r = self._request("POST", f"/invoices/{invoice_id}/approve", "Gagal menyetujui pembayaran")
        return invoice_from_api(self._json(r, "Gagal menyetujui pembayaran"))

    def upload_payment_proof(
        self,
        invoice_id: str,
        filename: str,
        content: bytes,
        mime: str = "application/octet-stream",
    ) -> Invoice:
        files = {"file": (filename, content, mime)}
        r = self._request("POST", f"/invoices/{invoice_id}/upload", "Gagal upload bukti pembayaran", files=files)
        return invoice_from_api(self._json(r, "Gagal upload bukti pembayaran"))

    # ---------- Notifikasi ----------

    def list_notifications(self, page: int = 0, size: int = 10) -> PaginatedResponse[Notification]:
        r = self._request(
            "GET", "/notifications", "Gagal memuat notifikasi",
            params={"page": page, "size": size},
        )
        return paginated_from_api(self._json(r, "Gagal memuat notifikasi"), notification_from_api)

    def notification_stats(self) -> NotificationStats:
        r = self._request("GET", "/notifications/stats", "Gagal memuat statistik notifikasi")
        return stats_from_api(self._json(r, "Gagal memuat statistik notifikasi"))
