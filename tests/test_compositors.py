from uangkas.dashboard.invoices.compositor import invoice_label, kpis_invoices, tabel_invoices
from uangkas.dashboard.members.compositor import member_options, tabel_members
from uangkas.dashboard.notifikasi.compositor import kartu_stats, tabel_notifikasi, tabel_per_tanggal
from uangkas.dashboard.rekapan.compositor import tabel_rekapan
from uangkas.utils.kas.mappers import invoice_from_api, member_from_api, notification_from_api, stats_from_api
from uangkas.utils.rekapan.aggregator import build_rekapan

from conftest import invoice_json, member_json, notif_json


def test_tabel_members():
    df = tabel_members([member_from_api(member_json()), member_from_api(member_json(id="m2", status="inactive"))])
    assert list(df.columns) == ["ID", "Nama", "No HP", "Status", "Terdaftar"]
    assert df["Status"].tolist() == ["Aktif", "Tidak Aktif"]
    assert df.loc[0, "Terdaftar"] == "5 Jan 2025"
    assert tabel_members([]).empty
    assert member_options([member_from_api(member_json())]) == {"m1": "Budi • 0812"}


def test_tabel_invoices_and_kpis():
    invoices = [
        invoice_from_api(invoice_json(id="a", status="paid", paidAt="2024-01-10", buktiPembayaran="b.png")),
        invoice_from_api(invoice_json(id="b", periode="022024", amount=25000)),
    ]
    df = tabel_invoices(invoices)
    assert df.loc[0, ["Periode", "Nominal", "Status", "Dibayar", "Bukti"]].tolist() == [
        "Jan 2024", "Rp 50.000", "Lunas", "2024-01-10", "Ada",
    ]
    assert df.loc[1, "Status"] == "Belum Lunas"
    assert kpis_invoices(invoices) == {
        "total": 2, "lunas": 1, "belum": 1, "terkumpul": "Rp 50.000", "tertunggak": "Rp 25.000",
    }
    assert invoice_label(invoices[1]) == "Budi • Feb 2024 • Rp 25.000"


def test_tabel_notifikasi():
    notifs = [
        notification_from_api(notif_json(id=1, time="2025-01-05T03:00:00Z", status="sent", message="Halo")),
        notification_from_api(notif_json(id=2, time="2025-01-04T03:00:00Z", status="failed")),
    ]
    df = tabel_notifikasi(notifs)
    assert list(df.columns) == ["Waktu", "Penerima", "Channel", "Status", "Pesan"]
    assert df.loc[0, "Waktu"] == "10:00"
    assert df.loc[1, "Status"] == "❌ Gagal"
    assert list(tabel_notifikasi(notifs, dengan_tanggal=True).columns)[0] == "Tanggal"
    assert [t for t, _ in tabel_per_tanggal(notifs)] == ["5 Jan 2025", "4 Jan 2025"]


def test_kartu_stats():
    stats = stats_from_api({"totalNotif": 9, "notifTerkirim": 5, "notifGagal": 3, "notifPending": 1})
    assert kartu_stats(stats) == [("Total Notifikasi", 9), ("Terkirim", 5), ("Gagal", 3), ("Pending", 1)]


def test_tabel_rekapan_uses_marks_and_month_labels():
    rek = build_rekapan(
        [member_from_api(member_json())],
        [invoice_from_api(invoice_json(periode="012025", status="paid")),
         invoice_from_api(invoice_json(periode="022025"))],
    )
    df = tabel_rekapan(rek)
    assert list(df.columns) == ["Nama Member", "Jan 2025", "Feb 2025", "Total Lunas", "Total Belum", "Total Bayar"]
    assert df.loc[0, ["Jan 2025", "Feb 2025"]].tolist() == ["✓", "✗"]
