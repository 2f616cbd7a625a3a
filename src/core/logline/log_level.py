from enum import Enum


class LogLevel(Enum):
    """
    Severity of a single log record.

    Fixed when the record is created. Each level carries the
    fixed-width label printed in the line prefix.
    """

    DEBUG = "Debug"     # Developer-focused diagnostic information
    INFO = "Info "      # Normal operation
    WARN = "Warn "      # Unexpected but recoverable condition
    ERROR = "Error"     # Operation failed, process continued

    @property
    def label(self) -> str:
        return self.value
