from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional
from chat_relay.core import config


class ChatRequest(BaseModel):
    # the browser surface posts camelCase keys; anything else in the body is ignored
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    message: str
    image: Optional[str] = None
    # any JSON value is accepted here; ModelChoice.from_selector decides what it means
    selected_model: Any = Field(default=None, alias="selectedModel")


class ChatResponse(BaseModel):
    text: str


class ErrorResponse(BaseModel):
    error: str


class ModelChoice(str, Enum):
    FLASH = "Gemini 2.5 Flash"
    PRO = "Gemini 2.5 Pro"

    @classmethod
    def default(cls) -> "ModelChoice":
        return cls.FLASH

    @classmethod
    def from_selector(cls, selector: Any, *, strict: bool = False) -> "ModelChoice":
        """
        Decode the client's free-form selector label.
        Matching is exact and case-sensitive. Unknown labels fall back to FLASH,
        and so does any value that is not a string,
        unless strict is set, in which case they raise ValueError.
        A missing selector is always FLASH.
        """
        if selector is None:
            return cls.default()
        if isinstance(selector, str):
            for choice in cls:
                if choice.value == selector:
                    return choice
        if strict:
            raise ValueError(f"unknown model selector: {selector!r}")
        return cls.default()

    @property
    def model_name(self) -> str:
        if self is ModelChoice.PRO:
            return config.GEMINI_MODEL_PRO
        return config.GEMINI_MODEL_FLASH
