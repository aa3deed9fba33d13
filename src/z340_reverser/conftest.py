import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """The CLI reconfigures structlog against streams that are closed after each test."""
    yield
    structlog.reset_defaults()
