"""Console logger used by the CLI."""

import sys

class SimpleConsoleLogger:
    """Simple structured logger writing `LEVEL: msg k=v` lines to stderr."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stderr

    def _emit(self, level: str, msg: str, kv: dict):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"{level}: {msg} {details}" if details else f"{level}: {msg}", file=self.stream)

    def info(self, msg: str, **kv):
        self._emit("INFO", msg, kv)

    def warn(self, msg: str, **kv):
        self._emit("WARN", msg, kv)

    def error(self, msg: str, **kv):
        self._emit("ERROR", msg, kv)
