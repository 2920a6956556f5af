import logging
from http import HTTPStatus
from typing import Optional
from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse
from chat_relay.schemas.chat import ChatRequest, ChatResponse, ErrorResponse
from chat_relay.api.deps import get_default_api_key, get_generate
from chat_relay.providers.base import AuthError, GenerateFn, ProviderError
from chat_relay.services.chat_service import relay_message
from chat_relay.services.content import BadRequest

router = APIRouter(prefix="/api", tags=["chat"])
logger = logging.getLogger(__name__)


def error_response(status: int) -> JSONResponse:
    # callers only ever see the generic reason phrase, never provider detail
    body = ErrorResponse(error=HTTPStatus(status).phrase)
    return JSONResponse(status_code=status, content=body.model_dump())


def status_for(exc: Exception, detailed: bool) -> int:
    if not detailed:
        return 500
    if isinstance(exc, AuthError):
        return 401
    if isinstance(exc, ProviderError):
        return 502
    return 500


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(
    req: ChatRequest,
    request: Request,
    x_api_key: Optional[str] = Header(default=None),
    generate: GenerateFn = Depends(get_generate),
    default_key: Optional[str] = Depends(get_default_api_key),
):
    state = request.app.state
    try:
        text = await relay_message(
            message=req.message,
            image=req.image,
            selected_model=req.selected_model,
            header_key=x_api_key,
            default_key=default_key,
            generate=generate,
            strict_model=state.strict_model_selector,
        )
    except BadRequest as e:
        logger.info("rejected chat request: %s", e)
        return error_response(400)
    except Exception as e:
        logger.exception("chat generation failed: %s", e)
        return error_response(status_for(e, state.detailed_error_status))

    return ChatResponse(text=text)
