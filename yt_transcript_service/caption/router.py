from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from yt_transcript_service.caption.schema import CaptionRequest, CaptionResponse
from yt_transcript_service.caption.service import CaptionService
from yt_transcript_service.constants import API_PREFIX
from yt_transcript_service.container import Container

router = APIRouter(prefix=API_PREFIX, tags=["captions"])

@router.post("/captions", response_model=CaptionResponse)
@inject
async def fetch_captions(
    request: Optional[CaptionRequest] = None,
    caption_service: CaptionService = Depends(Provide[Container.caption_service])
):
    request = request or CaptionRequest()
    return await caption_service.get_captions(request.url, request.lang)
