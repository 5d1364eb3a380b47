import pytest
import requests

from uangkas.utils.kas.client import KasApiError
from uangkas.utils.kas.schema import InvoiceStatus, MemberStatus
from uangkas.utils.pagination.controller import ListResourceController, LoadOutcome

from conftest import FakeResponse, invoice_json, member_json, notif_json, page_json


def test_authorized_request_sends_bearer_and_json_headers(make_client):
    cli = make_client(FakeResponse(200, [member_json()]))
    members = cli.list_members()
    call = cli.http.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://kas.test/api/members"
    assert call["headers"]["Authorization"] == "Bearer tok-123"
    assert call["headers"]["Content-Type"] == "application/json"
    assert members[0].nama == "Budi"


def test_login_does_not_send_authorization(make_client):
    cli = make_client(FakeResponse(200, {"token": "abc", "role": "admin", "expires_in": 3600}))
    res = cli.login("admin", "rahasia")
    call = cli.http.calls[0]
    assert "Authorization" not in call["headers"]
    assert call["json"] == {"username": "admin", "password": "rahasia"}
    assert (res.token, res.role, res.expires_in) == ("abc", "admin", 3600)


def test_login_error_uses_response_text_or_status(make_client):
    cli = make_client(FakeResponse(401, text="Invalid credentials"), FakeResponse(500, text=""))
    with pytest.raises(KasApiError, match="Invalid credentials") as e:
        cli.login("a", "b")
    assert e.value.status_code == 401
    with pytest.raises(KasApiError, match="Login failed with status 500"):
        cli.login("a", "b")


def test_non_2xx_raises_with_status_and_body(make_client):
    cli = make_client(FakeResponse(404, text="not found"))
    with pytest.raises(KasApiError) as e:
        cli.get_member("x")
    assert e.value.status_code == 404
    assert e.value.body == "not found"


def test_connection_error_is_wrapped(make_client):
    cli = make_client(requests.ConnectionError("refused"))
    with pytest.raises(KasApiError) as e:
        cli.list_invoices()
    assert e.value.status_code is None


def test_logout_tolerates_plain_text(make_client):
    cli = make_client(FakeResponse(200, text="Logged out successfully"), FakeResponse(200, {"message": "bye"}))
    assert cli.logout() == "Logged out successfully"
    assert cli.logout() == "bye"


def test_member_mutations_send_camel_case_body(make_client):
    cli = make_client(FakeResponse(200, member_json()), FakeResponse(200, member_json(status="inactive")),
                      FakeResponse(200, text=""))
    cli.create_member("Budi", "0812", "active")
    cli.update_member("m1", "Budi", "0812", MemberStatus.INACTIVE)
    assert cli.delete_member("m1") == {}
    create, update, delete = cli.http.calls
    assert create["json"] == {"nama": "Budi", "noHp": "0812", "status": "active"}
    assert (update["method"], update["url"]) == ("PUT", "http://kas.test/api/members/m1")
    assert update["json"]["status"] == "inactive"
    assert delete["method"] == "DELETE"


def test_create_and_approve_invoice(make_client):
    cli = make_client(FakeResponse(200, invoice_json()), FakeResponse(200, invoice_json(status="paid")))
    cli.create_invoice("m1", "Budi", "012024", 50000)
    paid = cli.approve_invoice("i1")
    body = cli.http.calls[0]["json"]
    assert body == {"memberId": "m1", "memberName": "Budi", "periode": "012024", "amount": 50000, "status": "unpaid"}
    assert cli.http.calls[1]["url"].endswith("/invoices/i1/approve")
    assert paid.status is InvoiceStatus.PAID


def test_upload_is_multipart_without_json_content_type(make_client):
    cli = make_client(FakeResponse(200, invoice_json(buktiPembayaran="bukti.png")))
    inv = cli.upload_payment_proof("i1", "bukti.png", b"\x89PNG", "image/png")
    call = cli.http.calls[0]
    assert "Content-Type" not in call["headers"]
    assert call["files"] == {"file": ("bukti.png", b"\x89PNG", "image/png")}
    assert inv.bukti_pembayaran == "bukti.png"


def test_list_notifications_passes_page_and_size(make_client):
    cli = make_client(FakeResponse(200, page_json([notif_json()], page=2, size=20, total_items=41, total_pages=3)))
    resp = cli.list_notifications(page=2, size=20)
    assert cli.http.calls[0]["params"] == {"page": 2, "size": 20}
    assert resp.total_pages == 3 and len(resp.data) == 1


def test_list_payload_that_is_not_an_array_raises(make_client):
    cli = make_client(FakeResponse(200, {"data": []}), FakeResponse(200, "teks"))
    with pytest.raises(KasApiError, match="Gagal memuat member") as e:
        cli.list_members()
    assert e.value.status_code == 200
    with pytest.raises(KasApiError, match="Gagal memuat invoice"):
        cli.list_invoices()


def test_member_list_keeps_rows_when_payload_is_malformed(make_client):
    cli = make_client(FakeResponse(200, [member_json(), member_json(id="m2")]), FakeResponse(200, {}))
    ctrl = ListResourceController(cli.list_members, name="members", initial_size=10)
    assert ctrl.mount() is LoadOutcome.OK
    assert ctrl.reload() is LoadOutcome.FAILED
    assert [m.id for m in ctrl.items] == ["m1", "m2"]


def test_non_json_success_body_raises_kas_api_error(make_client):
    cli = make_client(FakeResponse(200, text="<html>gateway</html>"), FakeResponse(201, text="ok"))
    with pytest.raises(KasApiError, match="respons bukan JSON") as e:
        cli.get_member("m1")
    assert e.value.status_code == 200
    assert e.value.body == "<html>gateway</html>"
    with pytest.raises(KasApiError, match="Gagal menyetujui pembayaran"):
        cli.approve_invoice("i1")


def test_delete_member_tolerates_plain_text_ack(make_client):
    cli = make_client(FakeResponse(200, text="Member deleted"))
    assert cli.delete_member("m1") == {"message": "Member deleted"}
