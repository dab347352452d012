import logging

import pytest
import structlog

from todo_list.logging_config import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    configure_logging(logging.WARNING)
    yield
    structlog.reset_defaults()
