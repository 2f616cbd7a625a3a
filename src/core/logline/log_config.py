import os
from dataclasses import dataclass
from typing import Mapping, Optional

from src.core.logline.log_color import ColorMode
from src.core.logline.log_exceptions import LogConfigError
from src.core.logline.log_stream import EmissionSinkSelector, get_default_selector


ENV_LOG_FILE = "LOGLINE_FILE"
ENV_COLOR = "LOGLINE_COLOR"
ENV_PLATFORM = "LOGLINE_PLATFORM"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _parse_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise LogConfigError(f"{name} must be a boolean flag, got {raw!r}")


@dataclass(frozen=True)
class LogConfig:
    """Where and how log lines are emitted."""

    log_file: Optional[str] = None      # Append destination; console when None
    color: ColorMode = ColorMode.AUTO
    platform_log: bool = False          # Route records to the host logging facility
    tag: str = "logline"                # Logger name used by the platform path

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LogConfig":
        """
        Build a config from LOGLINE_* environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ

        color = ColorMode.AUTO
        raw_color = env.get(ENV_COLOR)
        if raw_color:
            try:
                color = ColorMode(raw_color.strip().lower())
            except ValueError as e:
                raise LogConfigError(
                    f"{ENV_COLOR} must be one of auto, always, never; got {raw_color!r}"
                ) from e

        raw_platform = env.get(ENV_PLATFORM)
        platform_log = _parse_flag(ENV_PLATFORM, raw_platform) if raw_platform is not None else False

        return cls(
            log_file=env.get(ENV_LOG_FILE) or None,
            color=color,
            platform_log=platform_log,
        )


def configure(config: LogConfig, selector: Optional[EmissionSinkSelector] = None) -> EmissionSinkSelector:
    """
    Apply a LogConfig to a selector (the process default when omitted).
    """
    target = selector if selector is not None else get_default_selector()
    target.color_mode = config.color
    target.set_platform_log(config.tag if config.platform_log else None)
    if config.log_file:
        target.set_log_file(config.log_file)
    return target
