"""
애플리케이션 전역 상수 정의
"""

SERVICE_NAME = "yt-transcript-service"


class ServerConfig:
    """HTTP 서버 관련 설정"""
    DEFAULT_HOST = "0.0.0.0"
    DEFAULT_PORT = 3000


class CaptionConfig:
    """자막 조회 관련 설정"""
    DEFAULT_LANGUAGE = "en"
    FETCH_TIMEOUT_SECONDS = 30.0
    UNKNOWN_ERROR = "Unknown error"


API_PREFIX = "/api/v1"

ENDPOINTS = [
    "/health",
    f"{API_PREFIX}/captions",
]
