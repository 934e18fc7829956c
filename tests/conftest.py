import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    """The CLI configures structlog globally; undo it between tests."""
    yield
    structlog.reset_defaults()
