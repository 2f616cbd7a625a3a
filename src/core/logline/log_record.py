"""
Module: log_record.py
Location: src/core/logline/

A LogRecord is one log line under construction. Values are streamed
into it, and leaving its scope performs the single emission:

    with log_info() as log:
        log << "armed: " << vehicle.armed

The record holds the selector's emission lock from scope entry until
its line has been written, so lines from different threads never
interleave.
"""

from datetime import datetime
from typing import Any, Iterable, List, Optional

from src.core.logline.log_callback import get_callback
from src.core.logline.log_color import Color, color_for
from src.core.logline.log_level import LogLevel
from src.core.logline.log_stream import EmissionSinkSelector, get_default_selector


def format_value(value: Any) -> str:
    """
    Text representation of an appended value.

    Byte strings render as two lowercase hex digits per byte.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).hex()
    return str(value)


def format_timestamp(moment: datetime) -> str:
    # 12-hour clock, no AM/PM marker
    return moment.strftime("%I:%M:%S")


def format_line(
    level: LogLevel,
    text: str,
    source_file: str,
    source_line: int,
    moment: datetime,
    color: str = "",
    reset: str = "",
) -> str:
    return (
        f"{color}[{format_timestamp(moment)}|{level.label}] {reset}"
        f"{text} ({source_file}:{source_line})\n"
    )


class LogRecord:
    """
    One log message: level, call-site location and accumulated text.

    The record only emits when used as a context manager. A record
    entered while its thread is already emitting (e.g. from inside a
    callback) is discarded instead of deadlocking.
    """

    def __init__(
        self,
        level: LogLevel,
        source_file: str,
        source_line: int,
        selector: Optional[EmissionSinkSelector] = None,
    ):
        self._level = level
        self._source_file = source_file
        self._source_line = source_line
        self._selector = selector if selector is not None else get_default_selector()

        self._parts: List[str] = []
        self._holds_lock = False
        self._emitted = False

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def source_file(self) -> str:
        return self._source_file

    @property
    def source_line(self) -> int:
        return self._source_line

    @property
    def text(self) -> str:
        return "".join(self._parts)

    # -------------------------------------------------
    # Accumulation
    # -------------------------------------------------
    def append(self, value: Any) -> "LogRecord":
        self._parts.append(format_value(value))
        return self

    def extend(self, values: Iterable[Any]) -> "LogRecord":
        for value in values:
            self.append(value)
        return self

    def __lshift__(self, value: Any) -> "LogRecord":
        return self.append(value)

    # -------------------------------------------------
    # Scope
    # -------------------------------------------------
    def __enter__(self) -> "LogRecord":
        self._holds_lock = self._selector.acquire_emission()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if not self._holds_lock:
            return False
        try:
            self._emit()
        finally:
            self._holds_lock = False
            self._selector.release_emission()
        # Exceptions from the caller's block propagate unchanged
        return False

    # -------------------------------------------------
    # Emission
    # -------------------------------------------------
    def _emit(self) -> None:
        if self._emitted:
            return
        self._emitted = True

        with self._selector.emitting():
            try:
                if self._deliver_to_callback():
                    return

                platform_sink = self._selector.platform_sink
                if platform_sink is not None:
                    platform_sink.emit(self._level, self.text)
                    return

                self._write_line()
            except Exception:
                # Logging must never break the caller.
                pass

    def _deliver_to_callback(self) -> bool:
        callback = get_callback()
        if callback is None:
            return False
        try:
            handled = callback(self._level, self.text, self._source_file, self._source_line)
        except Exception:
            # A failing callback does not consume the record
            return False
        return bool(handled)

    def _write_line(self) -> None:
        stream = self._selector.get_log_stream()
        line = format_line(
            self._level,
            self.text,
            self._source_file,
            self._source_line,
            self._selector.now(),
            color=self._selector.color_code(color_for(self._level), stream),
            reset=self._selector.color_code(Color.RESET, stream),
        )
        stream.write(line)
        stream.flush()
