import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from youtube_transcript_api import (
    NoTranscriptFound,
    TranscriptsDisabled,
    YouTubeTranscriptApi,
)
from youtube_transcript_api.proxies import GenericProxyConfig


class BaseCaptionClient(ABC):
    """자막 조회 클라이언트 인터페이스"""

    @abstractmethod
    async def fetch(self, video_id: str, lang: str) -> List[Dict]:
        """video_id 영상의 lang 자막을 순서대로 반환합니다. 각 항목은 최소한 "text" 키를 가집니다."""


class YouTubeCaptionClient(BaseCaptionClient):
    def __init__(self, proxy_url: Optional[str] = None, api: Optional[YouTubeTranscriptApi] = None):
        self.logger = logging.getLogger(__name__)
        if api is None:
            proxy_config = None
            if proxy_url:
                proxy_config = GenericProxyConfig(http_url=proxy_url, https_url=proxy_url)
            api = YouTubeTranscriptApi(proxy_config=proxy_config)
        self.api = api

    def __fetch_raw(self, video_id: str, lang: str) -> List[Dict]:
        try:
            fetched = self.api.fetch(video_id, languages=[lang])
        except (NoTranscriptFound, TranscriptsDisabled):
            self.logger.info(f"자막이 존재하지 않습니다. video_id={video_id}, lang={lang}")
            return []

        return fetched.to_raw_data()

    async def fetch(self, video_id: str, lang: str) -> List[Dict]:
        return await asyncio.to_thread(self.__fetch_raw, video_id, lang)
