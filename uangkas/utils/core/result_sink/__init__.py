from .service import make_sink, resolve_sink_from_flags, ResultSink
from .json_file_sink import JsonFileSink
from .stdout_sink import StdoutSink

__all__ = ["make_sink", "resolve_sink_from_flags", "ResultSink", "JsonFileSink", "StdoutSink"]
