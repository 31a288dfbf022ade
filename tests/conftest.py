import io

import pytest

from forward_autodiff.logging_system import LogLevel, configure_logging


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep the global logger off the console during tests"""
    logger = configure_logging(log_level=LogLevel.SILENT, stream=io.StringIO())
    yield logger
    logger.close()
