# scripts/rekapan/ekspor_rekapan.py
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from uangkas.config.paths import rekapan_export_dir
from uangkas.utils.core.logs import setup_logger
from uangkas.utils.kas import KasApiError, NotAuthenticated, client_from_env
from uangkas.utils.rekapan.export import write_rekapan_files
from uangkas.utils.rekapan.service import muat_rekapan, ringkasan_rekapan

FORMATS = {"csv": ("csv",), "xlsx": ("xlsx",), "semua": ("csv", "xlsx")}


def main() -> int:
    setup_logger("rekapan")
    parser = argparse.ArgumentParser(description="Ekspor rekapan pembayaran uang kas (CSV/XLSX).")
    parser.add_argument("--format", choices=list(FORMATS), type=lambda s: s.lower(), default="semua")
    parser.add_argument("--outdir", type=Path, default=None, help="Default: EXPORTS_DIR/rekapan")
    args = parser.parse_args()

    out_dir = args.outdir or rekapan_export_dir()
    try:
        rekapan = muat_rekapan(client_from_env())
    except (KasApiError, NotAuthenticated) as e:
        logging.error("Gagal memuat rekapan: %s", e)
        return 1

    r = ringkasan_rekapan(rekapan)
    logging.info("Rekapan: %d member, %d periode, total bayar=%s", r["members"], r["periodes"], r["total_bayar"])
    for fmt, path in write_rekapan_files(rekapan, out_dir, FORMATS[args.format]).items():
        logging.info("✓ %s: %s", fmt.upper(), path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
