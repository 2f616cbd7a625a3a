import io
from datetime import datetime

import pytest

from src.core.logline.log_callback import set_callback
from src.core.logline.log_color import ColorMode
from src.core.logline.log_stream import EmissionSinkSelector


FIXED_TIME = datetime(2024, 3, 14, 9, 5, 33)


@pytest.fixture
def console() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def selector(console):
    sel = EmissionSinkSelector(
        console=console,
        clock=lambda: FIXED_TIME,
        color_mode=ColorMode.NEVER,
    )
    yield sel
    sel.close_log_file()


@pytest.fixture(autouse=True)
def no_callback():
    set_callback(None)
    yield
    set_callback(None)
