from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

from uangkas.config.paths import log_dir

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def setup_logger(nama: str, level: int = logging.INFO) -> Path:
    """
    Inisialisasi logging root: file di LOGS_DIR/<nama>/<nama>_<stamp>.log + console.
    Panggilan berikutnya di proses yang sama tidak menambah handler (basicConfig).
    """
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = log_dir(nama) / f"{nama}_{stamp}.log"
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.FileHandler(log_file, encoding="utf-8"), logging.StreamHandler()],
    )
    logging.info("Log diinisialisasi di %s", log_file)
    return log_file
