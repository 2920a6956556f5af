# turns a chat request into provider content parts
# an image arrives as a browser data URL: data:<mime>;base64,<payload>

import re
from typing import Optional
from chat_relay.providers.base import Content, ImagePart


class BadRequest(ValueError):
    pass


_DATA_URL = re.compile(r"^data:(?P<mime>[^,]*?);base64,(?P<data>.*)$", re.DOTALL)


def parse_data_url(image: str) -> ImagePart:
    m = _DATA_URL.match(image)
    if m is None:
        raise BadRequest("image must be a base64 data URL")
    # payload is passed through as-is, the provider decodes it
    return {"inline_data": {"mime_type": m.group("mime"), "data": m.group("data")}}


def build_content(message: str, image: Optional[str]) -> Content:
    if image:
        return [message, parse_data_url(image)]
    return message
