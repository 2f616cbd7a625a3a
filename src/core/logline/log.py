"""
Module: log.py
Location: src/core/logline/

Call-site entry points. Each factory captures the caller's file
basename and line number and returns a chainable LogRecord:

    with log_warn() as log:
        log << "link lost after " << timeout_s << " s"

A record only emits when its with-block ends. A bare statement such
as `log_info() << "x"` builds a record and drops it without output.

The one-shot helpers emit a single line in one statement:

    warn("link lost after ", timeout_s, " s")
"""

import inspect
import os
from typing import Any, Iterable, Optional, Tuple

from src.core.logline.log_level import LogLevel
from src.core.logline.log_record import LogRecord
from src.core.logline.log_stream import EmissionSinkSelector


def _caller_location(depth: int) -> Tuple[str, int]:
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None or frame.f_back is None:
                break
            frame = frame.f_back
        if frame is None:
            return "<unknown>", 0
        return os.path.basename(frame.f_code.co_filename), frame.f_lineno
    finally:
        del frame


def _make_record(
    level: LogLevel, selector: Optional[EmissionSinkSelector], stacklevel: int
) -> LogRecord:
    source_file, source_line = _caller_location(stacklevel + 1)
    return LogRecord(level, source_file, source_line, selector=selector)


def log_debug(*, selector: Optional[EmissionSinkSelector] = None, stacklevel: int = 1) -> LogRecord:
    return _make_record(LogLevel.DEBUG, selector, stacklevel + 1)


def log_info(*, selector: Optional[EmissionSinkSelector] = None, stacklevel: int = 1) -> LogRecord:
    return _make_record(LogLevel.INFO, selector, stacklevel + 1)


def log_warn(*, selector: Optional[EmissionSinkSelector] = None, stacklevel: int = 1) -> LogRecord:
    return _make_record(LogLevel.WARN, selector, stacklevel + 1)


def log_err(*, selector: Optional[EmissionSinkSelector] = None, stacklevel: int = 1) -> LogRecord:
    return _make_record(LogLevel.ERROR, selector, stacklevel + 1)


# -------------------------------------------------
# One-shot helpers
# -------------------------------------------------
def _emit_values(
    level: LogLevel,
    values: Iterable[Any],
    selector: Optional[EmissionSinkSelector],
    stacklevel: int,
) -> None:
    with _make_record(level, selector, stacklevel + 1) as record:
        record.extend(values)


def debug(*values: Any, selector: Optional[EmissionSinkSelector] = None, stacklevel: int = 1) -> None:
    _emit_values(LogLevel.DEBUG, values, selector, stacklevel + 1)


def info(*values: Any, selector: Optional[EmissionSinkSelector] = None, stacklevel: int = 1) -> None:
    _emit_values(LogLevel.INFO, values, selector, stacklevel + 1)


def warn(*values: Any, selector: Optional[EmissionSinkSelector] = None, stacklevel: int = 1) -> None:
    _emit_values(LogLevel.WARN, values, selector, stacklevel + 1)


def error(*values: Any, selector: Optional[EmissionSinkSelector] = None, stacklevel: int = 1) -> None:
    _emit_values(LogLevel.ERROR, values, selector, stacklevel + 1)
