# tests/conftest.py
import os
import logging
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Ensure test-friendly env before the app module is imported
os.environ.setdefault("PROVIDER", "gemini")
os.environ.setdefault("STRICT_MODEL_SELECTOR", "false")
os.environ.setdefault("DETAILED_ERROR_STATUS", "false")

from chat_relay.main import create_app

_DEFAULT_KEY = "default-key"


class FakeProvider:
    """Stands in for the Model Client: records every call, returns `reply` or raises `error`."""

    def __init__(self, reply: str = "provider output") -> None:
        self.reply = reply
        self.error: Exception | None = None
        self.calls: list[dict] = []

    async def __call__(self, model, api_key, content):
        self.calls.append({"model": model, "api_key": api_key, "content": content})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def default_key():
    return _DEFAULT_KEY

@pytest.fixture
def provider():
    return FakeProvider()

@pytest.fixture
def app(provider, default_key):
    return create_app(
        default_api_key=default_key,
        generate=provider,
        strict_model_selector=False,
        detailed_error_status=False,
    )

@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

@pytest.fixture
def caplog_info(caplog):
    caplog.set_level(logging.INFO)
    return caplog
