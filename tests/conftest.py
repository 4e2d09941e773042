import logging

import pytest
import structlog

from decimal_money.infrastructure.logger import clear_context, reset_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Filter structlog below WARNING and undo any logging setup."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING)
    )
    yield

    reset_logging()
    clear_context()
    root_logger.handlers = saved_handlers
    root_logger.setLevel(saved_level)
    structlog.reset_defaults()
