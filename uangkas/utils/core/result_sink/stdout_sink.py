from __future__ import annotations

import json
import sys
from typing import Optional


class StdoutSink:
    """Cetak hasil ke layar (mudah dibaca)."""

    def emit(self, result: dict, *, name: Optional[str] = None) -> None:
        if name:
            sys.stdout.write(f"\n=== Hasil: {name} ===\n")
        sys.stdout.write(json.dumps(result, ensure_ascii=False, indent=2, default=str))
        sys.stdout.write("\n")
        sys.stdout.flush()
