from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from src.logging_config import LOG_NAME


def _reset_project_logger() -> None:
    logger = logging.getLogger(LOG_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    # pytest attaches its capture handlers to non-propagating loggers
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def reset_project_logger() -> Generator[None, None, None]:
    """Ensure every test starts and ends with an unconfigured project logger."""
    _reset_project_logger()
    yield
    _reset_project_logger()
