# ABOUTME: Shared test configuration
# ABOUTME: Resets loguru sinks and structlog configuration between tests

import pytest
import structlog
from loguru import logger

from isaac_vote_tools.utils.logging import config as logging_config


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger.remove()
    structlog.reset_defaults()
    logging_config._active_mode = None
