"""
유틸리티 함수들 패키지
"""

from .youtube import extract_video_id

__all__ = [
    'extract_video_id',
]
