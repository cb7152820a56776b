# tests/conftest.py
import logging
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from diagram_gateway.core.config import Settings
from diagram_gateway.main import create_app
from diagram_gateway.providers.factory import build_registry



@pytest.fixture
def settings():
    # synthetic keys so nothing depends on the developer's .env
    return Settings(deepseek_api_key="test-deepseek-key", gemini_api_key="test-gemini-key")

@pytest.fixture
def registry(settings):
    return build_registry(settings)

@pytest_asyncio.fixture
async def app(settings):
    return create_app(settings)

@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

@pytest.fixture
def caplog_debug(caplog):
    caplog.set_level(logging.DEBUG)
    return caplog
