from __future__ import annotations

"""Logger setup for parash: the `parash.*` namespace, plain or JSON output, and
opt-in socket/file tracing through `PARASH_TRACE_IO=1`.

Logs always go to stderr by default; stdout carries the
'Running:' / 'Exit code:' report and must stay clean.
"""

import logging
import os
from typing import TYPE_CHECKING, Optional, TextIO

if TYPE_CHECKING:
    from parash.core.interfaces.logging import LoggerLikeProtocol


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON with a fixed schema.

    Fields:
        - ts: ISO-8601 timestamp in UTC with millisecond precision.
        - level: Log level name.
        - module: Logger name (e.g., 'parash.interpreter').
        - msg: Formatted message string.
        - version: parash.__version__ (fixed per formatter instance).
        - ctx: Optional dictionary attached to the record as 'context'.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Lazy import: parash/__init__ imports this module indirectly.
            from parash import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("PARASH_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.WARNING, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Attach a single stderr handler to the `parash` logger (idempotent).

    A second call only adjusts the level, so repeated `Parash.run` calls in
    one process do not stack handlers.
    """
    base = logging.getLogger("parash")
    if base.handlers:
        base.setLevel(level)
        return base

    import sys as _sys

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'parash'."""
    if not name or name == "parash":
        return logging.getLogger("parash")
    if name.startswith("parash."):
        return logging.getLogger(name)
    return logging.getLogger(f"parash.{name}")


def _trace_io_enabled() -> bool:
    return os.getenv("PARASH_TRACE_IO") == "1"


def trace_io(logger: LoggerLikeProtocol, message: str, **ctx) -> None:
    """Debug-log a fetch/transport step, but only when PARASH_TRACE_IO=1."""
    if not _trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
