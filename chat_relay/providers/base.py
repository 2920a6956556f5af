# declares the provider contract (generate(...)) the relay calls
# lets us swap providers without touching endpoint logic

from typing import Awaitable, Callable, Dict, List, TypedDict, Union


class ProviderError(Exception):
    """Generation failed at the provider (transport, quota, bad reply)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthError(ProviderError):
    """The credential was missing or rejected."""


class ImagePart(TypedDict):
    inline_data: Dict[str, str]  # {"mime_type": ..., "data": <base64>}


ContentPart = Union[str, ImagePart]
Content = Union[str, List[ContentPart]]

# generate(model, api_key, content) -> text
GenerateFn = Callable[[str, str, Content], Awaitable[str]]
