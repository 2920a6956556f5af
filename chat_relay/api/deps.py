from typing import Optional
from fastapi import Request
from chat_relay.providers.base import GenerateFn

def get_generate(request: Request) -> GenerateFn:
    return request.app.state.generate

def get_default_api_key(request: Request) -> Optional[str]:
    return request.app.state.default_api_key
