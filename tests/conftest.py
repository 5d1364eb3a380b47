from __future__ import annotations

import json as _json
from typing import Any, Dict, List, Optional

import pytest

from uangkas.utils.kas.client import KasApiClient


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        if text is None:
            text = "" if payload is None else _json.dumps(payload)
        self.text = text
        self.content = text.encode("utf-8")

    def json(self) -> Any:
        return _json.loads(self.text)


class FakeSession:
    """Pengganti requests.Session: mengembalikan respons berurutan dan mencatat setiap panggilan."""

    def __init__(self, *responses: FakeResponse) -> None:
        self.responses: List[FakeResponse] = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self.responses:
            raise AssertionError(f"request tak terduga: {method} {url}")
        r = self.responses.pop(0)
        if isinstance(r, Exception):
            raise r
        return r


@pytest.fixture
def make_client():
    def _make(*responses, token: Optional[str] = "tok-123") -> KasApiClient:
        return KasApiClient(base_url="http://kas.test/api/", token=token, session=FakeSession(*responses))
    return _make


def member_json(id="m1", nama="Budi", no_hp="0812", status="active", **extra) -> Dict[str, Any]:
    return {"id": id, "nama": nama, "noHp": no_hp, "status": status, "createdAt": "2025-01-05T10:00:00", **extra}


def invoice_json(id="i1", member_id="m1", periode="012024", status="unpaid", amount=50000, **extra) -> Dict[str, Any]:
    return {
        "id": id, "memberId": member_id, "memberName": "Budi", "periode": periode,
        "status": status, "amount": amount, **extra,
    }


def notif_json(id=1, receiver="0812", time="2025-01-05T03:00:00Z", status="Sent", **extra) -> Dict[str, Any]:
    return {"id": id, "receiver": receiver, "time": time, "status": status, "channel": "whatsapp", **extra}


def page_json(data, page=0, size=10, total_items=None, total_pages=None, has_next=False, has_previous=False):
    total_items = len(data) if total_items is None else total_items
    total_pages = (1 if data else 0) if total_pages is None else total_pages
    return {
        "data": data, "page": page, "size": size, "totalItems": total_items,
        "totalPages": total_pages, "hasNext": has_next, "hasPrevious": has_previous,
    }
