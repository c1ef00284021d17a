import asyncio
import logging
from typing import List, Optional

from yt_transcript_service.caption.client import BaseCaptionClient
from yt_transcript_service.caption.exception import CaptionErrorCode, CaptionException
from yt_transcript_service.caption.schema import CaptionLine, CaptionResponse
from yt_transcript_service.constants import CaptionConfig
from yt_transcript_service.utils import extract_video_id


class CaptionService:
    def __init__(self, client: BaseCaptionClient, fetch_timeout: float = CaptionConfig.FETCH_TIMEOUT_SECONDS):
        self.logger = logging.getLogger(__name__)
        self.client = client
        self.fetch_timeout = fetch_timeout

    @staticmethod
    def build_transcript(captions: List[CaptionLine]) -> str:
        return " ".join(cap.text for cap in captions).strip()

    async def __fetch_captions(self, video_id: str, lang: str) -> List[CaptionLine]:
        try:
            raw_captions = await asyncio.wait_for(
                self.client.fetch(video_id, lang), timeout=self.fetch_timeout
            )
        except asyncio.TimeoutError:
            raise TimeoutError(f"Timed out after {self.fetch_timeout:g} seconds")

        return [CaptionLine.model_validate(raw) for raw in raw_captions or []]

    async def get_captions(self, url: Optional[str], lang: Optional[str] = None) -> CaptionResponse:
        lang = lang or CaptionConfig.DEFAULT_LANGUAGE
        try:
            # 1) 요청 검증
            if not url:
                raise CaptionException(CaptionErrorCode.CAPTION_URL_MISSING, status_code=400)

            video_id = extract_video_id(url)
            if not video_id:
                raise CaptionException(CaptionErrorCode.CAPTION_URL_INVALID, status_code=400)

            # 2) 자막 조회
            captions = await self.__fetch_captions(video_id, lang)
            if not captions:
                raise CaptionException(
                    CaptionErrorCode.CAPTION_NOT_FOUND,
                    status_code=404,
                    detail={"videoId": video_id, "requestedLang": lang},
                )

            # 3) 응답 구성
            return CaptionResponse(
                video_id=video_id,
                requested_lang=lang,
                transcript=self.build_transcript(captions),
                captions=captions,
            )

        except CaptionException:
            raise
        except Exception as e:
            message = str(e) or CaptionConfig.UNKNOWN_ERROR
            self.logger.error(f"Error fetching captions: {message}")
            raise CaptionException(
                CaptionErrorCode.CAPTION_FETCH_FAILED,
                status_code=500,
                detail={"details": message},
            )
