import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("box_layout")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
