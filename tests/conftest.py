import logging

import pytest


@pytest.fixture(autouse=True)
def efpinput_debug_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="efpinput")
