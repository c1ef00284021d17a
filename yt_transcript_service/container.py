from dotenv import load_dotenv

load_dotenv()

from dependency_injector import containers, providers

from yt_transcript_service.caption.client import YouTubeCaptionClient
from yt_transcript_service.caption.service import CaptionService
from yt_transcript_service.constants import CaptionConfig, ServerConfig


def _env_number(name: str, cast):
    """숫자형 환경 변수 파서 (잘못된 값이면 변수 이름을 포함한 메시지로 실패)"""
    def parse(value):
        try:
            return cast(value)
        except (TypeError, ValueError):
            raise ValueError(f"환경 변수 {name} 값이 올바르지 않습니다: {value!r}") from None
    return parse


class Container(containers.DeclarativeContainer):
    """의존성 주입 컨테이너"""

    # Configuration
    config = providers.Configuration()

    # Caption
    caption_client = providers.Singleton(
        YouTubeCaptionClient,
        proxy_url=config.captions.proxy_url,
    )
    caption_service = providers.Factory(
        CaptionService,
        client=caption_client,
        fetch_timeout=config.captions.timeout,
    )


def create_container() -> Container:
    """환경 변수를 읽어 설정이 채워진 컨테이너를 생성합니다."""
    container = Container()
    config = container.config

    config.server.host.from_env("HOST", default=ServerConfig.DEFAULT_HOST)
    config.server.port.from_env(
        "PORT", as_=_env_number("PORT", int), default=ServerConfig.DEFAULT_PORT
    )

    config.captions.timeout.from_env(
        "CAPTIONS_FETCH_TIMEOUT",
        as_=_env_number("CAPTIONS_FETCH_TIMEOUT", float),
        default=CaptionConfig.FETCH_TIMEOUT_SECONDS,
    )
    config.captions.proxy_url.from_env("YT_PROXY_URL", default="")
    return container


# 전역 컨테이너 인스턴스
container = create_container()
