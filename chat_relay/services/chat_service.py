import logging
from typing import Any, Optional
from chat_relay.providers.base import AuthError, GenerateFn
from chat_relay.schemas.chat import ModelChoice
from chat_relay.services.content import BadRequest, build_content

logger = logging.getLogger(__name__)


def resolve_api_key(header_key: Optional[str], default_key: Optional[str]) -> str:
    # an empty header counts as absent
    if header_key:
        return header_key
    if default_key:
        return default_key
    raise AuthError("no API key supplied and no default configured")


def resolve_model(selector: Any, *, strict: bool) -> ModelChoice:
    try:
        return ModelChoice.from_selector(selector, strict=strict)
    except ValueError as e:
        raise BadRequest(str(e)) from e


async def relay_message(
    *,
    message: str,
    image: Optional[str],
    selected_model: Any,
    header_key: Optional[str],
    default_key: Optional[str],
    generate: GenerateFn,
    strict_model: bool = False,
) -> str:
    # request-shape problems surface as BadRequest before anything else
    choice = resolve_model(selected_model, strict=strict_model)
    content = build_content(message, image)

    api_key = resolve_api_key(header_key, default_key)
    model = choice.model_name
    logger.info("relaying chat: model=%s image=%s", model, bool(image))
    return await generate(model, api_key, content)
