from __future__ import annotations
import os
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

# ----------------------------- util internal -----------------------------
def _expand_path(p: str | os.PathLike | None) -> Optional[Path]:
    if p is None:
        return None
    s = str(p).strip().strip('"').strip("'")
    s = os.path.expandvars(os.path.expanduser(s))
    try:
        return Path(s).resolve()
    except Exception:
        return Path(s)

def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default

def _int_tuple_env(name: str, default: Tuple[int, ...]) -> Tuple[int, ...]:
    """Baca daftar angka dipisah koma, mis. "10,25,50"."""
    raw = os.getenv(name)
    if not raw:
        return default
    out = []
    for part in raw.split(","):
        part = part.strip()
        if part.isdigit() and int(part) >= 1:
            out.append(int(part))
    return tuple(out) or default

def ensure_dir(p: Path) -> Path:
    p.mkdir(parents=True, exist_ok=True)
    return p

def get_timestamp() -> str:
    return datetime.now().strftime("%Y%m%d_%H%M%S")

def backup_path(target: Path) -> Path:
    """
    Path backup standar untuk `target`: folder `backup` di sebelahnya,
    nama file diberi timestamp.
    """
    target = Path(target)
    bdir = ensure_dir(target.parent / "backup")
    return bdir / f"{target.stem}_{get_timestamp()}{target.suffix}"

# --------------------------- Variabel lingkungan --------------------------
BASE_PATH   = _expand_path(os.getenv("BASE_PATH", "~/.uangkas")) or Path.home() / ".uangkas"
LOGS_DIR    = _expand_path(os.getenv("LOGS_DIR", str(BASE_PATH / "logs"))) or (BASE_PATH / "logs")
EXPORTS_DIR = _expand_path(os.getenv("EXPORTS_DIR", str(BASE_PATH / "exports"))) or (BASE_PATH / "exports")
RESULTS_DIR = _expand_path(os.getenv("RESULTS_DIR", str(BASE_PATH / "results"))) or (BASE_PATH / "results")
APP_TIMEZONE= os.getenv("APP_TIMEZONE", "Asia/Jakarta")

# API backend uang kas
API_BASE_URL    = os.getenv("KAS_API_BASE_URL", "http://localhost:8081/api").rstrip("/")
API_TIMEOUT_SEC = _int_env("KAS_API_TIMEOUT", 30)

# Paginasi: server (notifikasi, 0-indexed) vs tabel lokal (1-indexed)
DEFAULT_PAGE_SIZE        = _int_env("DEFAULT_PAGE_SIZE", 10)
SERVER_PAGE_SIZE_OPTIONS = _int_tuple_env("SERVER_PAGE_SIZE_OPTIONS", (10, 20, 50))
CLIENT_PAGE_SIZE_OPTIONS = _int_tuple_env("CLIENT_PAGE_SIZE_OPTIONS", (10, 25, 50, 100))

# Nominal default invoice baru (rupiah)
DEFAULT_INVOICE_AMOUNT = _int_env("DEFAULT_INVOICE_AMOUNT", 50000)

def cli_credentials() -> Tuple[Optional[str], Optional[str]]:
    """Kredensial untuk script CLI (KAS_USERNAME / KAS_PASSWORD)."""
    return os.getenv("KAS_USERNAME"), os.getenv("KAS_PASSWORD")

# --------------------------- Log & export per domain ----------------------
def log_dir(nama: str) -> Path:
    return ensure_dir(LOGS_DIR / nama)

def rekapan_export_dir() -> Path:
    return ensure_dir(EXPORTS_DIR / "rekapan")

def notifikasi_results_dir() -> Path:
    return ensure_dir(RESULTS_DIR / "notifikasi")
