import pytest

from yt_transcript_service.container import create_container


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("HOST", "PORT", "CAPTIONS_FETCH_TIMEOUT", "YT_PROXY_URL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_server_defaults(clean_env):
    """환경 변수가 없으면 0.0.0.0:3000으로 동작해야 한다."""
    container = create_container()

    assert container.config.server.host() == "0.0.0.0"
    assert container.config.server.port() == 3000
    assert container.config.captions.timeout() == 30.0


def test_server_follows_env(clean_env):
    clean_env.setenv("HOST", "127.0.0.1")
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("CAPTIONS_FETCH_TIMEOUT", "2.5")

    container = create_container()

    assert container.config.server.host() == "127.0.0.1"
    assert container.config.server.port() == 8080
    assert container.config.captions.timeout() == 2.5


@pytest.mark.parametrize("name", ["PORT", "CAPTIONS_FETCH_TIMEOUT"])
def test_malformed_number_names_the_variable(clean_env, name):
    """숫자가 아닌 값이면 변수 이름이 포함된 오류로 실패해야 한다."""
    clean_env.setenv(name, "abc")

    with pytest.raises(ValueError, match=name):
        create_container()
