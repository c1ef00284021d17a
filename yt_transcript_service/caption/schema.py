from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CaptionLine(BaseModel):
    """개별 자막 라인 (text 외 필드는 그대로 전달)"""
    model_config = ConfigDict(extra="allow")

    text: str = Field(..., description="자막 텍스트")


class CaptionRequest(BaseModel):
    """자막 조회 요청"""
    url: Optional[str] = Field(None, description="YouTube 영상 URL")
    lang: Optional[str] = Field(None, description="자막 언어 코드 (기본값: en)")


class CaptionResponse(BaseModel):
    """자막 조회 응답"""
    model_config = ConfigDict(populate_by_name=True)

    video_id: str = Field(..., alias="videoId", description="YouTube 영상 ID")
    requested_lang: str = Field(..., alias="requestedLang", description="요청한 언어 코드")
    transcript: str = Field(..., description="자막 텍스트를 공백으로 이어붙인 전체 스크립트")
    captions: List[CaptionLine] = Field(..., description="라이브러리가 반환한 순서 그대로의 자막 라인")
