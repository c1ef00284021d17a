import pytest

from yt_transcript_service.utils import extract_video_id


@pytest.mark.parametrize("url", [
    "https://www.youtube.com/watch?v=I3w8zAFa_G4",
    "https://youtube.com/watch?feature=share&v=I3w8zAFa_G4",
    "https://youtu.be/I3w8zAFa_G4",
    "https://www.youtube.com/embed/I3w8zAFa_G4",
    "youtu.be/I3w8zAFa_G4",
])
def test_extract_video_id_valid_cases(url):
    """인식 가능한 유튜브 링크면 video_id가 정상적으로 반환되어야 한다."""
    assert extract_video_id(url) == "I3w8zAFa_G4"


@pytest.mark.parametrize("url, expected", [
    ("https://youtu.be/abc123?t=5", "abc123"),
    ("https://www.youtube.com/watch?v=abc123&list=PL1", "abc123"),
    ("https://www.youtube.com/embed/abc123#start", "abc123"),
])
def test_extract_video_id_stops_at_delimiter(url, expected):
    """&, ?, # 이전까지만 video_id로 취급해야 한다."""
    assert extract_video_id(url) == expected


@pytest.mark.parametrize("url", [
    "not a youtube link",
    "https://example.com/watch?v=I3w8zAFa_G4",
    "https://www.youtube.com/watch?v=",
    "",
])
def test_extract_video_id_with_invalid_url(url):
    """유효하지 않은 링크면 None이 반환되어야 한다."""
    assert extract_video_id(url) is None


def test_extract_video_id_is_lenient():
    """길이나 문자 종류는 검증하지 않는다."""
    assert extract_video_id("https://youtu.be/x!y z") == "x!y z"
