import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging():
    # CLI tests point structlog at CliRunner's streams, which close afterwards.
    yield
    structlog.reset_defaults()
