import logging

import pytest


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    yield
    cli_logger = logging.getLogger("amberpy")
    cli_logger.handlers.clear()
    cli_logger.setLevel(logging.NOTSET)
    cli_logger.propagate = True
