import logging

import pytest

from hookline.config.settings import Settings
from hookline.core.logger import create_logger


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def host_logger(caplog):
    caplog.set_level(logging.DEBUG)
    return create_logger("verbose")
