from enum import Enum

from yt_transcript_service.exception import TranscriptServiceException


class CaptionErrorCode(Enum):
    CAPTION_URL_MISSING = ("CAPTION_001", "Missing 'url' field")
    CAPTION_URL_INVALID = ("CAPTION_002", "Invalid YouTube URL")
    CAPTION_NOT_FOUND = ("CAPTION_003", "No captions found (maybe not available in this language)")
    CAPTION_FETCH_FAILED = ("CAPTION_004", "Failed to fetch captions")
    CAPTION_REQUEST_INVALID = ("CAPTION_005", "Invalid request body")

    def __init__(self, code: str, message: str):
        self._code = code
        self._message = message

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message

class CaptionException(TranscriptServiceException):
    def __init__(self, code: Enum, *, status_code: int = 400, detail=None):
        super().__init__(code, status_code=status_code, detail=detail)
