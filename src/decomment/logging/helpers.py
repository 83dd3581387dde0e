from __future__ import annotations

"""Logging helpers: logger naming, base configuration and IO tracing.

This module provides:
    - JsonLogFormatter: one JSON object per record with a fixed schema.
    - setup_base_logger: configure the 'decomment' logger once.
    - get_logger: namespaced logger factory ('decomment.*').
    - trace_io: debug messages gated by DECOMMENT_TRACE_IO=1.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

from decomment.constants import ENV_TRACE_IO, ENV_VERSION, LOGGER_NAME

PLAIN_FORMAT = "%(levelname)s: %(message)s"
_OWNED_MARK = "_decomment_handler"


class JsonLogFormatter(logging.Formatter):
    """Emit logs as compact JSON.

    Fields:
        - ts: ISO-8601 UTC timestamp, millisecond precision.
        - level: Level name.
        - module: Logger name (e.g. 'decomment.runtime').
        - msg: Formatted message.
        - version: decomment.__version__, resolved once per formatter.
        - ctx: Dict attached to the record as `extra={'context': {...}}`.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Late import: the package __init__ imports this module.
            from decomment import __version__ as _v
            return str(_v)
        except ImportError:
            return os.getenv(ENV_VERSION, "unknown")

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'decomment' logger and return it.

    A second call only adjusts the level unless a different output mode or
    stream is requested, in which case our handler is replaced. Handlers
    attached by others (e.g. test capture) are left alone.
    """
    base = logging.getLogger(LOGGER_NAME)
    base.setLevel(level)
    base.propagate = False

    target = stream or sys.stderr
    for handler in list(base.handlers):
        if not getattr(handler, _OWNED_MARK, False):
            continue
        same_stream = getattr(handler, "stream", None) is target
        same_mode = isinstance(handler.formatter, JsonLogFormatter) == bool(json_logs)
        if same_stream and same_mode:
            return base
        base.removeHandler(handler)

    handler = logging.StreamHandler(target)
    handler.setFormatter(JsonLogFormatter() if json_logs else logging.Formatter(PLAIN_FORMAT))
    setattr(handler, _OWNED_MARK, True)
    base.addHandler(handler)
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'decomment'."""
    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def is_trace_io_enabled() -> bool:
    return os.getenv(ENV_TRACE_IO) == "1"


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit a debug IO trace when DECOMMENT_TRACE_IO=1."""
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
