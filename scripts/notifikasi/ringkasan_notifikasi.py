# scripts/notifikasi/ringkasan_notifikasi.py
from __future__ import annotations

import argparse
import logging

from uangkas.config.paths import DEFAULT_PAGE_SIZE, notifikasi_results_dir
from uangkas.utils.core.logs import setup_logger
from uangkas.utils.core.result_sink import resolve_sink_from_flags
from uangkas.utils.kas import KasApiError, NotAuthenticated, client_from_env
from uangkas.utils.notifications.service import ringkasan_notifikasi


def main() -> int:
    setup_logger("notifikasi")
    parser = argparse.ArgumentParser(description="Ringkasan statistik + satu halaman log notifikasi.")
    parser.add_argument("--page", type=int, default=0, help="Halaman (0-indexed)")
    parser.add_argument("--size", type=int, default=DEFAULT_PAGE_SIZE)
    parser.add_argument("--to-file", action="store_true", help="Tulis JSON ke RESULTS_DIR/notifikasi")
    parser.add_argument("--keep", type=int, default=2, help="Jumlah backup yang disimpan")
    args = parser.parse_args()

    if args.page < 0 or args.size < 1:
        parser.error("--page harus >= 0 dan --size >= 1")

    try:
        payload = ringkasan_notifikasi(client_from_env(), page=args.page, size=args.size)
    except (KasApiError, NotAuthenticated) as e:
        logging.error("Gagal memuat notifikasi: %s", e)
        return 1

    sink = resolve_sink_from_flags(
        to_file=args.to_file,
        output_dir=notifikasi_results_dir(),
        prefix="notifikasi",
        keep=args.keep,
    )
    sink.emit(payload, name=f"p{args.page}_s{args.size}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
