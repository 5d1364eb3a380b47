from uangkas.utils.kas.mappers import invoice_from_api, member_from_api
from uangkas.utils.kas.schema import InvoiceStatus, RekapanCell
from uangkas.utils.rekapan.aggregator import BELUM, LUNAS, build_rekapan, collect_periodes, rekapan_to_frame
from uangkas.utils.rekapan.service import muat_rekapan, ringkasan_rekapan

from conftest import FakeResponse, invoice_json, member_json


def _members(*ids):
    return [member_from_api(member_json(id=i, nama=f"Member {i}")) for i in ids]


def _invoices(*raws):
    return [invoice_from_api(r) for r in raws]


def test_example_row_for_m1():
    invoices = _invoices(
        invoice_json(id="a", member_id="m1", periode="012024", status="paid", amount=50000, paidAt="2024-01-10"),
        invoice_json(id="b", member_id="m1", periode="022024", status="unpaid", amount=0),
    )
    rek = build_rekapan(_members("m1"), invoices)
    assert rek.periodes == ["012024", "022024"]
    row = rek.rows[0]
    assert row.total_paid == 50000
    assert row.total_unpaid == 1
    assert row.payments["012024"] == RekapanCell(InvoiceStatus.PAID, 50000, "2024-01-10")
    assert row.payments["022024"].paid_date is None


def test_member_without_invoices_gets_unpaid_cells():
    invoices = _invoices(
        invoice_json(member_id="m1", periode="012024"),
        invoice_json(member_id="m1", periode="032024"),
    )
    rek = build_rekapan(_members("m1", "m2"), invoices)
    m2 = rek.rows[1]
    assert all(c == RekapanCell(InvoiceStatus.UNPAID, 0) for c in m2.payments.values())
    assert m2.total_unpaid == len(rek.periodes) == 2
    assert m2.total_paid == 0


def test_periodes_are_global_and_sorted():
    invoices = _invoices(
        invoice_json(member_id="m2", periode="122023"),
        invoice_json(member_id="m1", periode="012024"),
        invoice_json(member_id="m1", periode="012024", id="dup"),
    )
    assert collect_periodes(invoices) == ["012024", "122023"]


def test_duplicate_invoice_paid_replaces_unpaid_cell():
    invoices = _invoices(
        invoice_json(id="x", member_id="m1", periode="012024", status="unpaid"),
        invoice_json(id="y", member_id="m1", periode="012024", status="paid", amount=50000),
    )
    row = build_rekapan(_members("m1"), invoices).rows[0]
    assert row.payments["012024"] == RekapanCell(InvoiceStatus.PAID, 50000, None)
    assert row.total_paid == 50000
    assert row.total_unpaid == 0
    assert row.total_lunas == 1


def test_duplicate_invoice_same_status_first_wins():
    invoices = _invoices(
        invoice_json(id="p", member_id="m1", periode="012024", status="paid", amount=50000, paidAt="2024-01-05"),
        invoice_json(id="q", member_id="m1", periode="012024", status="unpaid", amount=10000),
        invoice_json(id="r", member_id="m1", periode="012024", status="paid", amount=20000, paidAt="2024-01-20"),
    )
    row = build_rekapan(_members("m1"), invoices).rows[0]
    assert row.payments["012024"] == RekapanCell(InvoiceStatus.PAID, 50000, "2024-01-05")
    assert row.total_paid == 70000
    assert row.total_unpaid == 0


def test_invoices_of_unknown_members_only_add_periods():
    rek = build_rekapan(_members("m1"), _invoices(invoice_json(member_id="ghost", periode="052024")))
    assert rek.periodes == ["052024"]
    assert [r.member_id for r in rek.rows] == ["m1"]


def test_frame_columns_and_values():
    invoices = _invoices(
        invoice_json(member_id="m1", periode="012024", status="paid", amount=50000),
        invoice_json(member_id="m1", periode="022024", status="paid", amount=25000),
    )
    df = rekapan_to_frame(build_rekapan(_members("m1", "m2"), invoices))
    assert list(df.columns) == ["Nama Member", "012024", "022024", "Total Lunas", "Total Belum", "Total Bayar"]
    m1, m2 = df.to_dict("records")
    assert (m1["012024"], m1["Total Lunas"], m1["Total Belum"], m1["Total Bayar"]) == (LUNAS, 2, 0, "Rp 75.000")
    assert (m2["022024"], m2["Total Lunas"], m2["Total Belum"]) == (BELUM, 0, 2)


def test_empty_frame_keeps_columns():
    df = rekapan_to_frame(build_rekapan([], []))
    assert df.empty
    assert list(df.columns) == ["Nama Member", "Total Lunas", "Total Belum", "Total Bayar"]


def test_muat_rekapan_uses_all_members(make_client):
    cli = make_client(
        FakeResponse(200, [member_json(id="m1"), member_json(id="m2", status="inactive")]),
        FakeResponse(200, [invoice_json(member_id="m1", status="paid")]),
    )
    rek = muat_rekapan(cli)
    assert len(rek.rows) == 2
    ringkasan = ringkasan_rekapan(rek)
    assert ringkasan == {"members": 2, "periodes": 1, "total_bayar": 50000, "sel_lunas": 1, "sel_belum": 1}
