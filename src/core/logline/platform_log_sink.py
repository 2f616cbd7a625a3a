import logging

from src.core.logline.log_level import LogLevel


PLATFORM_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class PlatformLogSink:
    """
    Forwards record text to the host logging facility.

    Records are written under a fixed tag with no timestamp prefix and
    no source location; the facility adds its own decoration.
    """

    def __init__(self, tag: str):
        self._tag = tag
        self._logger = logging.getLogger(tag)

    @property
    def tag(self) -> str:
        return self._tag

    def emit(self, level: LogLevel, text: str) -> None:
        self._logger.log(PLATFORM_LEVELS[level], "%s", text)
