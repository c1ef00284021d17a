import pytest

from yt_transcript_service.caption.client import BaseCaptionClient
from yt_transcript_service.container import container


@pytest.fixture
def fake_captions():
    return [
        {"text": "Hello", "start": 0.0, "duration": 1.5},
        {"text": "world", "start": 1.5, "duration": 2.0},
    ]


@pytest.fixture
def override_client():
    """컨테이너의 caption_client를 테스트용 클라이언트로 교체한다."""
    def _override(client: BaseCaptionClient) -> BaseCaptionClient:
        container.caption_client.override(client)
        return client

    yield _override
    container.caption_client.reset_override()
