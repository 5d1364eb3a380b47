from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from uangkas.utils.core.io import atomic_write_json


def _sanitize_filename_part(s: str) -> str:
    return re.sub(r"[^A-Za-z0-9._-]+", "_", s).strip("_") or "latest"


@dataclass
class JsonFileSink:
    """Tulis hasil ke <output_dir>/<prefix>_<name>.json dengan backup + rotasi.

    Backup lama di <output_dir>/backup/ dipangkas hingga `keep` file.
    """

    output_dir: Path
    prefix: str = "results"
    keep: int = 2

    def emit(self, result: dict, *, name: Optional[str] = None) -> None:
        target = self.target_for(name)
        atomic_write_json(target, result, do_backup=True)
        self._rotate_backups(target)
        logging.info("Hasil ditulis: %s", target)

    def target_for(self, name: Optional[str]) -> Path:
        base = f"{self.prefix}_{_sanitize_filename_part(name) if name else 'latest'}.json"
        return Path(self.output_dir) / base

    def _rotate_backups(self, target: Path) -> List[Path]:
        bkp_dir = target.parent / "backup"
        if not bkp_dir.is_dir():
            return []
        candidates = [
            p for p in bkp_dir.iterdir()
            if p.is_file() and p.name.startswith(f"{target.stem}_") and p.suffix == target.suffix
        ]
        candidates.sort(key=lambda p: p.stat().st_mtime, reverse=True)
        removed = []
        for old in candidates[self.keep:]:
            try:
                old.unlink(missing_ok=True)
                removed.append(old)
            except OSError:
                logging.warning("Gagal menghapus backup lama: %s", old)
        return removed
