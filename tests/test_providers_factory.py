# tests/test_providers_factory.py
import pytest
from chat_relay.core import config
from chat_relay.providers import factory, gemini
from chat_relay.providers.base import ProviderError

def test_gemini_provider_selected(monkeypatch):
    monkeypatch.setattr(config, "PROVIDER", "gemini")
    assert factory.get_generate() is gemini.generate

@pytest.mark.asyncio
async def test_unknown_provider_raises_provider_error(monkeypatch):
    # An unknown provider name still yields a callable; calling it fails as a provider error.
    monkeypatch.setattr(config, "PROVIDER", "nope")
    generate = factory.get_generate()
    with pytest.raises(ProviderError) as ei:
        await generate("gemini-2.5-flash", "k", "hi")
    assert "nope" in str(ei.value)
