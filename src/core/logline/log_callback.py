import threading
from typing import Callable, Optional

from src.core.logline.log_level import LogLevel

# (level, message_text, file, line) -> handled
LogCallback = Callable[[LogLevel, str, str, int], bool]

_lock = threading.Lock()
_callback: Optional[LogCallback] = None


def set_callback(callback: Optional[LogCallback]) -> None:
    """
    Install a callback that sees every record before the default sinks.

    A callback returning True consumes the record; nothing is written to
    the console, the log file or the platform log. Pass None to remove it.
    """
    global _callback
    with _lock:
        _callback = callback


def get_callback() -> Optional[LogCallback]:
    with _lock:
        return _callback
