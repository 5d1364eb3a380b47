# uangkas/dashboard/rekapan/compositor.py
from __future__ import annotations

import pandas as pd

from uangkas.utils.core.formatters import format_periode
from uangkas.utils.kas.schema import Rekapan
from uangkas.utils.rekapan.aggregator import LUNAS, rekapan_to_frame

_SIMBOL = {True: "✓", False: "✗"}


def tabel_rekapan(rekapan: Rekapan) -> pd.DataFrame:
    """Versi layar: sel ✓/✗ dan header periode 'Jan 2025'."""
    df = rekapan_to_frame(rekapan)
    for p in rekapan.periodes:
        df[p] = df[p].map(lambda v: _SIMBOL[v == LUNAS])
    return df.rename(columns={p: format_periode(p) for p in rekapan.periodes})
