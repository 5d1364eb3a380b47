# uangkas/utils/core/io.py
from __future__ import annotations

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

# Kebijakan backup terpusat di paths.py
from uangkas.config.paths import backup_path

def atomic_write_bytes(target: Path, data: bytes, do_backup: bool = False) -> Path:
    """
    Tulis bytes secara atomik:
      1) buat direktori bila perlu
      2) (opsional) backup file lama ke .../backup/
      3) tulis ke file sementara di direktori yang sama
      4) os.replace ke tujuan
    """
    target = Path(target)
    target.parent.mkdir(parents=True, exist_ok=True)

    if do_backup and target.exists():
        shutil.copy2(target, backup_path(target))

    with tempfile.NamedTemporaryFile(
        mode="wb",
        delete=False,
        dir=str(target.parent),
        suffix=target.suffix or ".tmp",
    ) as tmp:
        tmp.write(data)
        tmp_path = Path(tmp.name)

    os.replace(tmp_path, target)
    return target

def atomic_write_json(target: Path, obj: Any, do_backup: bool = True) -> Path:
    payload = json.dumps(obj, ensure_ascii=False, indent=2, default=str)
    return atomic_write_bytes(target, payload.encode("utf-8"), do_backup=do_backup)
