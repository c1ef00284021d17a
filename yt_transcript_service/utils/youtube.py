"""
YouTube URL 처리 유틸리티 함수들
"""

import re
from typing import Optional

_VIDEO_ID_PATTERN = re.compile(
    r"(?:youtube\.com/.*v=|youtu\.be/|youtube\.com/embed/)([^&?#]+)"
)


def extract_video_id(url: str) -> Optional[str]:
    """
    URL에서 YouTube 영상 ID를 추출

    지원하는 형식
    - https://www.youtube.com/watch?v=<id>
    - https://youtu.be/<id>
    - https://www.youtube.com/embed/<id>

    Args:
        url: 입력 URL 문자열

    Returns:
        영상 ID, 인식할 수 없는 URL이면 None
    """
    match = _VIDEO_ID_PATTERN.search(url)
    return match.group(1) if match else None
