"""
Module: log_stream.py
Location: src/core/logline/

Process-wide emission state: which stream receives formatted lines,
the emission lock that serializes records, and the terminal color
handling for the console.
"""

import sys
import threading
from contextlib import contextmanager
from datetime import datetime
from typing import Callable, Iterator, Optional, TextIO

from colorama import just_fix_windows_console

from src.core.logline.log_color import Color, ColorMode, ansi_code
from src.core.logline.platform_log_sink import PlatformLogSink

# Shared by every selector: a thread emitting through one selector
# must not start a record on any other.
_emission_state = threading.local()


class EmissionSinkSelector:
    """
    Decides where formatted log text goes and serializes access to it.

    Two independent locks are held here:
      - the emission lock, held by a LogRecord for its whole scope
      - the stream lock, guarding which stream is active

    Lock order is always emission lock first, then stream lock.
    """

    def __init__(
        self,
        *,
        console: Optional[TextIO] = None,
        clock: Optional[Callable[[], datetime]] = None,
        color_mode: ColorMode = ColorMode.AUTO,
    ):
        if console is None:
            just_fix_windows_console()

        # None means "whatever sys.stdout is at write time"
        self._console = console
        self._clock = clock or datetime.now
        self._color_mode = color_mode

        self._file: Optional[TextIO] = None
        self._file_path: Optional[str] = None
        self._platform_sink: Optional[PlatformLogSink] = None

        self._emission_lock = threading.RLock()
        self._stream_lock = threading.Lock()

    # -------------------------------------------------
    # Destination
    # -------------------------------------------------
    @property
    def console_stream(self) -> TextIO:
        return self._console if self._console is not None else sys.stdout

    @property
    def file_path(self) -> Optional[str]:
        with self._stream_lock:
            return self._file_path

    def set_log_file(self, file_path: str) -> None:
        """
        Append all further stream output to file_path.

        On failure the active destination is left as it was and the
        failure is reported on the console. Never raises.
        """
        with self._emission_lock, self._stream_lock:
            try:
                new_file = open(file_path, "a", encoding="utf-8", errors="backslashreplace")
            except (OSError, ValueError):
                self._report(f"Failed to open log file: {file_path}")
                return

            previous = self._file
            self._file = new_file
            self._file_path = file_path

            if previous is not None:
                try:
                    previous.close()
                except OSError:
                    pass

            self._report(f"Opened log file: {file_path}")

    def close_log_file(self) -> None:
        """
        Close the log file, if any, and fall back to the console.
        """
        with self._emission_lock, self._stream_lock:
            if self._file is None:
                return
            try:
                self._file.close()
            except OSError:
                pass
            self._file = None
            self._file_path = None

    def get_log_stream(self) -> TextIO:
        with self._stream_lock:
            if self._file is not None:
                return self._file
            return self.console_stream

    def _report(self, message: str) -> None:
        self._write_console(message + "\n")

    def _write_console(self, text: str) -> None:
        console = self.console_stream
        try:
            console.write(text)
            console.flush()
        except (OSError, ValueError):
            pass

    # -------------------------------------------------
    # Platform log facility
    # -------------------------------------------------
    @property
    def platform_sink(self) -> Optional[PlatformLogSink]:
        return self._platform_sink

    def set_platform_log(self, tag: Optional[str]) -> None:
        """
        Route records to the host logging facility under tag.

        None switches back to the console/file stream path.
        """
        with self._emission_lock:
            self._platform_sink = PlatformLogSink(tag) if tag else None

    # -------------------------------------------------
    # Color
    # -------------------------------------------------
    @property
    def color_mode(self) -> ColorMode:
        return self._color_mode

    @color_mode.setter
    def color_mode(self, mode: ColorMode) -> None:
        self._color_mode = mode

    def colors_enabled(self, stream: TextIO) -> bool:
        if stream is not self.console_stream:
            return False
        if self._color_mode is ColorMode.ALWAYS:
            return True
        if self._color_mode is ColorMode.NEVER:
            return False
        try:
            return stream.isatty()
        except (AttributeError, ValueError):
            return False

    def color_code(self, color: Color, stream: TextIO) -> str:
        if not self.colors_enabled(stream):
            return ""
        return ansi_code(color)

    def set_color(self, color: Color) -> None:
        """
        Standalone terminal helper: write a color code to the console.

        Records embed their codes in the line itself via color_code().
        """
        code = self.color_code(color, self.console_stream)
        if code:
            self._write_console(code)

    def reset_color(self) -> None:
        self.set_color(Color.RESET)

    # -------------------------------------------------
    # Clock
    # -------------------------------------------------
    def now(self) -> datetime:
        return self._clock()

    # -------------------------------------------------
    # Emission serialization
    # -------------------------------------------------
    def acquire_emission(self) -> bool:
        """
        Take the emission lock for a record entering its scope.

        Returns False, without blocking, when the calling thread is
        already emitting a record; such a record must be discarded.
        """
        if self.is_emitting():
            return False
        self._emission_lock.acquire()
        return True

    def release_emission(self) -> None:
        self._emission_lock.release()

    def is_emitting(self) -> bool:
        return getattr(_emission_state, "emitting", False)

    @contextmanager
    def emitting(self) -> Iterator[None]:
        _emission_state.emitting = True
        try:
            yield
        finally:
            _emission_state.emitting = False


_default_lock = threading.Lock()
_default_selector: Optional[EmissionSinkSelector] = None


def get_default_selector() -> EmissionSinkSelector:
    """
    Process-wide selector, created on first use with the console active.
    """
    global _default_selector
    with _default_lock:
        if _default_selector is None:
            _default_selector = EmissionSinkSelector()
        return _default_selector


def set_default_selector(selector: Optional[EmissionSinkSelector]) -> None:
    global _default_selector
    with _default_lock:
        _default_selector = selector


def set_log_file(file_path: str) -> None:
    get_default_selector().set_log_file(file_path)


def get_log_stream() -> TextIO:
    return get_default_selector().get_log_stream()
