import logging

import pytest

from src.core.logline.log_level import LogLevel
from src.core.logline.log_record import LogRecord


@pytest.mark.parametrize(
    "level, levelno",
    [
        (LogLevel.DEBUG, logging.DEBUG),
        (LogLevel.INFO, logging.INFO),
        (LogLevel.WARN, logging.WARNING),
        (LogLevel.ERROR, logging.ERROR),
    ],
)
def test_platform_path_forwards_raw_text(selector, console, caplog, level, levelno) -> None:
    caplog.set_level(logging.DEBUG, logger="logline")
    selector.set_platform_log("logline")

    with LogRecord(level, "x.cpp", 7, selector=selector) as record:
        record << "gps fix " << 3

    assert console.getvalue() == ""
    assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [
        ("logline", levelno, "gps fix 3")
    ]


def test_platform_path_can_be_switched_off(selector, console, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="logline")
    selector.set_platform_log("logline")
    selector.set_platform_log(None)

    with LogRecord(LogLevel.INFO, "x.cpp", 7, selector=selector) as record:
        record << "back on console"

    assert caplog.records == []
    assert console.getvalue() == "[09:05:33|Info ] back on console (x.cpp:7)\n"
