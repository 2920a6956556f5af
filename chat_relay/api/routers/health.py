from fastapi import APIRouter

router = APIRouter(tags=["meta"])

@router.get("/health")
def health():
    # liveness only, the provider is not contacted
    return {"status": "ok"}
