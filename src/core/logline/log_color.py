from enum import Enum, auto

from colorama import Fore, Style

from src.core.logline.log_level import LogLevel


class Color(Enum):
    """
    Terminal foreground colors used by the console stream path.
    """

    RED = auto()
    GREEN = auto()
    YELLOW = auto()
    BLUE = auto()
    GRAY = auto()
    RESET = auto()


ANSI_CODES = {
    Color.RED: Fore.RED,
    Color.GREEN: Fore.GREEN,
    Color.YELLOW: Fore.YELLOW,
    Color.BLUE: Fore.BLUE,
    Color.GRAY: Fore.LIGHTBLACK_EX,
    Color.RESET: Style.RESET_ALL,
}

LEVEL_COLORS = {
    LogLevel.DEBUG: Color.GREEN,
    LogLevel.INFO: Color.BLUE,
    LogLevel.WARN: Color.YELLOW,
    LogLevel.ERROR: Color.RED,
}


def color_for(level: LogLevel) -> Color:
    return LEVEL_COLORS[level]


def ansi_code(color: Color) -> str:
    return ANSI_CODES[color]


class ColorMode(Enum):
    """
    When the console stream path adds color codes.

    Log files never receive color codes.
    """

    AUTO = "auto"       # Only when the console is a TTY
    ALWAYS = "always"
    NEVER = "never"
