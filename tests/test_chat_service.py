# tests/test_chat_service.py
import pytest
from chat_relay.providers.base import AuthError
from chat_relay.schemas.chat import ModelChoice
from chat_relay.services.chat_service import relay_message, resolve_api_key, resolve_model
from chat_relay.services.content import BadRequest

def test_header_key_wins():
    assert resolve_api_key("user", "default") == "user"

@pytest.mark.parametrize("header", [None, ""])
def test_missing_or_empty_header_uses_default(header):
    assert resolve_api_key(header, "default") == "default"

def test_no_key_anywhere_is_auth_error():
    with pytest.raises(AuthError):
        resolve_api_key("", None)

def test_from_selector_is_case_sensitive():
    assert ModelChoice.from_selector("Gemini 2.5 Pro") is ModelChoice.PRO
    assert ModelChoice.from_selector("gemini 2.5 pro") is ModelChoice.FLASH
    assert ModelChoice.from_selector(None) is ModelChoice.FLASH
    assert ModelChoice.PRO.model_name == "gemini-2.5-pro"
    assert ModelChoice.FLASH.model_name == "gemini-2.5-flash"

def test_strict_selector_raises_bad_request():
    with pytest.raises(BadRequest):
        resolve_model("Gemini 3 Ultra", strict=True)
    assert resolve_model(None, strict=True) is ModelChoice.FLASH

@pytest.mark.asyncio
async def test_relay_forwards_to_provider(provider):
    provider.reply = "ok"
    out = await relay_message(
        message="Hello",
        image=None,
        selected_model="Gemini 2.5 Pro",
        header_key=None,
        default_key="d",
        generate=provider,
    )
    assert out == "ok"
    assert provider.calls == [{"model": "gemini-2.5-pro", "api_key": "d", "content": "Hello"}]

@pytest.mark.asyncio
async def test_bad_image_checked_before_credential(provider):
    # a malformed request is reported as such even when no key is available
    with pytest.raises(BadRequest):
        await relay_message(
            message="hi",
            image="not-a-data-url",
            selected_model=None,
            header_key=None,
            default_key=None,
            generate=provider,
        )
    assert provider.calls == []

@pytest.mark.parametrize("selector", [5, True, ["Gemini 2.5 Pro"], {"x": 1}])
def test_non_string_selector_is_flash_unless_strict(selector):
    assert resolve_model(selector, strict=False) is ModelChoice.FLASH
    with pytest.raises(BadRequest):
        resolve_model(selector, strict=True)
