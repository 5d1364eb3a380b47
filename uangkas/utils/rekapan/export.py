# uangkas/utils/rekapan/export.py
"""
Adapter export rekapan: CSV (UTF-8, koma, teks dikutip) dan XLSX (openpyxl).

Hanya menerima nilai Rekapan; tidak pernah memanggil API.
"""
from __future__ import annotations

import csv
import io
import logging
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, Optional

import pandas as pd

from uangkas.utils.core.io import atomic_write_bytes
from uangkas.utils.kas.schema import Rekapan
from uangkas.utils.rekapan.aggregator import rekapan_to_frame

__all__ = [
    "SHEET_NAME",
    "export_filename",
    "rekapan_csv_bytes",
    "rekapan_xlsx_bytes",
    "write_rekapan_files",
]

SHEET_NAME = "Rekapan Pembayaran"
CSV_MIME = "text/csv"
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

_W_NAMA = 25
_W_PERIODE = 12
_W_TOTAL = (12, 12, 15)


def export_filename(ext: str, hari: Optional[date] = None) -> str:
    """Rekapan_Uang_Kas_<YYYY-MM-DD>.<ext>"""
    d = hari or date.today()
    return f"Rekapan_Uang_Kas_{d.isoformat()}.{ext.lstrip('.')}"


def rekapan_csv_bytes(rekapan: Rekapan) -> bytes:
    df = rekapan_to_frame(rekapan)
    text = df.to_csv(index=False, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    return text.encode("utf-8")


def _apply_layout(ws, n_periodes: int) -> None:
    from openpyxl.styles import Alignment, Font
    from openpyxl.utils import get_column_letter

    widths = [_W_NAMA, *([_W_PERIODE] * n_periodes), *_W_TOTAL]
    for idx, w in enumerate(widths, start=1):
        ws.column_dimensions[get_column_letter(idx)].width = w
    for cell in ws[1]:
        cell.font = Font(bold=True)
        cell.alignment = Alignment(horizontal="center", vertical="center")


def rekapan_xlsx_bytes(rekapan: Rekapan) -> bytes:
    df = rekapan_to_frame(rekapan)
    bio = io.BytesIO()
    with pd.ExcelWriter(bio, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=SHEET_NAME)
        _apply_layout(writer.sheets[SHEET_NAME], len(rekapan.periodes))
    return bio.getvalue()


def write_rekapan_files(
    rekapan: Rekapan,
    out_dir: Path,
    formats: Iterable[str] = ("csv", "xlsx"),
    hari: Optional[date] = None,
) -> Dict[str, Path]:
    """Tulis file export secara atomik. Hasil: {format: path}."""
    builders = {"csv": rekapan_csv_bytes, "xlsx": rekapan_xlsx_bytes}
    out: Dict[str, Path] = {}
    for fmt in formats:
        if fmt not in builders:
            raise ValueError(f"Format tidak didukung: {fmt}")
        target = Path(out_dir) / export_filename(fmt, hari)
        atomic_write_bytes(target, builders[fmt](rekapan))
        logging.info("Rekapan %s → %s", fmt.upper(), target)
        out[fmt] = target
    return out
