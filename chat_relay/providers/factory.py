from chat_relay.core import config
from chat_relay.providers.base import Content, GenerateFn, ProviderError


async def _not_implemented(model: str, api_key: str, content: Content) -> str:
    raise ProviderError(f"Unknown provider: {config.PROVIDER}")


def get_generate() -> GenerateFn:
    if config.PROVIDER == "gemini":
        from chat_relay.providers.gemini import generate
        return generate
    return _not_implemented
