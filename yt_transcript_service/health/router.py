from fastapi import APIRouter

from yt_transcript_service.constants import ENDPOINTS, SERVICE_NAME

router = APIRouter(tags=["health"])


@router.get("/")
def root() -> dict:
    return {
        "service": SERVICE_NAME,
        "status": "ok",
        "endpoints": ENDPOINTS,
    }


@router.get("/health")
def health() -> dict:
    """업스트림 상태와 무관하게 항상 ok"""
    return {"ok": True, "service": SERVICE_NAME}
