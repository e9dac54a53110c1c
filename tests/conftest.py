import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch):
    """Keep log configuration from one test (e.g. a CLI run) out of the next."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("ECOMMERCE_DATA_DIR", raising=False)
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers = []
