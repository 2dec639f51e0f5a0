import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_loguru():
    yield
    # the CLI points loguru at the runner's stderr, which is closed afterwards
    logger.remove()
