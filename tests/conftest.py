import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_package_logger():
    logger = logging.getLogger("blockliquid")
    level = logger.level
    yield
    logger.setLevel(level)
