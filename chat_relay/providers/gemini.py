import httpx
from typing import Any, Dict, List
from chat_relay.providers.base import AuthError, Content, ProviderError
from chat_relay.core import config


def _to_parts(content: Content) -> List[Dict[str, Any]]:
    items = [content] if isinstance(content, str) else content
    parts: List[Dict[str, Any]] = []
    for item in items:
        if isinstance(item, str):
            parts.append({"text": item})
        else:
            parts.append({"inline_data": dict(item["inline_data"])})
    return parts


def _error_reasons(data: Any) -> List[str]:
    err = data.get("error") if isinstance(data, dict) else None
    if not isinstance(err, dict):
        return []
    return [d.get("reason", "") for d in err.get("details") or [] if isinstance(d, dict)]


def _raise_for_status(r: httpx.Response) -> None:
    if r.is_success:
        return
    try:
        data = r.json()
    except ValueError:
        data = None
    if r.status_code in (401, 403) or "API_KEY_INVALID" in _error_reasons(data):
        raise AuthError(f"Gemini rejected the API key ({r.status_code})", status_code=r.status_code)
    raise ProviderError(f"Gemini HTTP {r.status_code}", status_code=r.status_code)


# finish reasons that mean the candidate text was withheld; STOP and MAX_TOKENS are fine
_BAD_FINISH_REASONS = {
    "SAFETY", "RECITATION", "LANGUAGE", "BLOCKLIST",
    "PROHIBITED_CONTENT", "SPII", "MALFORMED_FUNCTION_CALL", "OTHER",
}


def _extract_text(data: Dict[str, Any]) -> str:
    """
    Text of the first candidate, joined across its parts.
    A reply with no candidates, or a candidate without text parts, is an empty string.
    A blocked prompt or a withheld candidate is a ProviderError.
    """
    feedback = data.get("promptFeedback")
    if isinstance(feedback, dict) and feedback.get("blockReason"):
        raise ProviderError(f"Prompt blocked: {feedback['blockReason']}")
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return ""
    first = candidates[0]
    if not isinstance(first, dict):
        raise ProviderError("Unexpected candidate shape from Gemini.")
    reason = first.get("finishReason")
    if reason in _BAD_FINISH_REASONS:
        raise ProviderError(f"Gemini withheld the reply (finishReason={reason}).")
    content = first.get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return ""
    return "".join(p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str))


async def generate(model: str, api_key: str, content: Content) -> str:
    payload = {"contents": [{"role": "user", "parts": _to_parts(content)}]}
    url = f"{config.GEMINI_API_BASE}/v1beta/models/{model}:generateContent"
    headers = {"x-goog-api-key": api_key}
    try:
        timeout = httpx.Timeout(config.REQUEST_TIMEOUT_S, connect=10.0)
        async with httpx.AsyncClient(timeout=timeout) as client:
            r = await client.post(url, json=payload, headers=headers)
            _raise_for_status(r)
            data = r.json()
    except httpx.HTTPError as e:
        raise ProviderError(f"Gemini HTTP error: {e}") from e
    except ValueError as e:
        raise ProviderError("Unexpected response body from Gemini.") from e
    if not isinstance(data, dict):
        raise ProviderError("Unexpected response type from Gemini.")
    return _extract_text(data)
