# uangkas/utils/core/result_sink/service.py
from __future__ import annotations

from typing import Protocol, Optional, Literal, Any

SinkKind = Literal["json", "stdout"]


class ResultSink(Protocol):
    """Kontrak tujuan hasil script CLI (ringkasan, snapshot).

    Halaman dashboard tidak menulis ke disk; hanya script yang memakai sink.
    """

    def emit(self, result: dict, *, name: Optional[str] = None) -> None:
        ...


def make_sink(kind: SinkKind, **kwargs: Any) -> ResultSink:
    """Pabrik sink.

    Examples:
        >>> from pathlib import Path
        >>> sink = make_sink("json", output_dir=Path("/tmp/results"), prefix="notifikasi", keep=2)
        >>> sink.emit({"ok": True}, name="stats")
    """
    if kind == "json":
        from .json_file_sink import JsonFileSink
        return JsonFileSink(**kwargs)
    elif kind == "stdout":
        from .stdout_sink import StdoutSink
        return StdoutSink()
    else:
        raise ValueError(f"Sink '{kind}' tidak didukung.")


def resolve_sink_from_flags(*, to_file: bool, **kwargs: Any) -> ResultSink:
    """--to-file → JsonFileSink (kwargs: output_dir, prefix, keep); selain itu stdout."""
    if to_file:
        return make_sink("json", **kwargs)
    return make_sink("stdout")
