# chat_relay/main.py
import logging
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from chat_relay.core import config
from chat_relay.api.routers.health import router as health_router
from chat_relay.api.routers.models import router as models_router
from chat_relay.api.routers.chat import router as chat_router, error_response
from chat_relay.providers.base import GenerateFn
from chat_relay.providers.factory import get_generate

logger = logging.getLogger(__name__)

_UNSET = object()


def create_app(
    *,
    default_api_key=_UNSET,  # None disables the fallback credential
    generate: Optional[GenerateFn] = None,
    strict_model_selector: Optional[bool] = None,
    detailed_error_status: Optional[bool] = None,
) -> FastAPI:
    app = FastAPI(title="Gemini Chat Relay", version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    """
Everything a handler needs is resolved here once and kept on app.state.
Handlers read it through Depends() / request.app.state, never from config directly,
so tests can build an app with their own key and a fake provider.
    """
    app.state.default_api_key = config.GOOGLE_API_KEY if default_api_key is _UNSET else default_api_key
    app.state.generate = generate or get_generate()
    app.state.strict_model_selector = (
        config.STRICT_MODEL_SELECTOR if strict_model_selector is None else strict_model_selector
    )
    app.state.detailed_error_status = (
        config.DETAILED_ERROR_STATUS if detailed_error_status is None else detailed_error_status
    )

    # malformed JSON or a body missing `message` is a plain 400 in the same {error} shape
    @app.exception_handler(RequestValidationError)
    async def _bad_request(request: Request, exc: RequestValidationError):
        logger.info("invalid request body on %s (%d errors)", request.url.path, len(exc.errors()))
        return error_response(400)

    # Routers
    app.include_router(health_router)
    app.include_router(models_router)
    app.include_router(chat_router)

    return app


app = create_app()
