from fastapi import APIRouter
from chat_relay.schemas.chat import ModelChoice

router = APIRouter(prefix="/api", tags=["models"])

@router.get("/models")
def list_models() -> dict:
    # selector labels the chat endpoint understands, in display order
    return {
        "models": [choice.value for choice in ModelChoice],
        "default": ModelChoice.default().value,
    }
