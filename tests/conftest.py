"""Pytest configuration and fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from config import Config
from quicklink.engine import InMemoryUrlShortener
from quicklink.service import UrlService
from quicklink.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def shortener():
    """Create an isolated in-memory shortener."""
    return InMemoryUrlShortener(key_length=5)


@pytest.fixture
def service(shortener, logger) -> UrlService:
    """Create service instance."""
    return UrlService(shortener=shortener, logger=logger)


@pytest.fixture
def config():
    """Create test configuration."""
    return Config(log_level="DEBUG")


@pytest.fixture
def app(service, config):
    """Create test FastAPI app."""
    return create_app(service_instance=service, config=config)


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
