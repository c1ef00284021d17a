import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from yt_transcript_service import __version__
from yt_transcript_service.caption.exception import CaptionErrorCode
from yt_transcript_service.caption.router import router as caption_router
from yt_transcript_service.constants import SERVICE_NAME, CaptionConfig
from yt_transcript_service.container import container
from yt_transcript_service.exception import BusinessException
from yt_transcript_service.health.router import router as health_router

# 로거 설정
logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    # Startup
    logger.info(
        f"✅ {SERVICE_NAME} running on http://{container.config.server.host()}:{container.config.server.port()}"
    )
    yield
    # Shutdown
    logger.info(f"🔄 {SERVICE_NAME} 종료 중...")


# FastAPI 앱 생성 (lifespan 이벤트 핸들러 포함)
app = FastAPI(
    title=SERVICE_NAME,
    version=__version__,
    lifespan=lifespan
)

# 의존성 주입 컨테이너 설정
container.wire(modules=["yt_transcript_service.caption.router"])

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

Instrumentator().instrument(app).expose(app)

@app.exception_handler(BusinessException)
async def business_exception_handler(request: Request, exc: BusinessException):
    logger.info("business_exception", extra={"path": str(request.url), "error_code": exc.error_code})
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.info("request_validation_error", extra={"path": str(request.url)})
    return JSONResponse(
        status_code=400,
        content={
            "error": CaptionErrorCode.CAPTION_REQUEST_INVALID.message,
            "details": [error.get("msg", "") for error in exc.errors()],
        },
    )

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"처리되지 않은 오류가 발생했습니다. path={request.url.path}")
    return JSONResponse(
        status_code=500,
        content={
            "error": CaptionErrorCode.CAPTION_FETCH_FAILED.message,
            "details": str(exc) or CaptionConfig.UNKNOWN_ERROR,
        },
    )

# 라우터 등록
app.include_router(health_router)
app.include_router(caption_router)


def run() -> None:
    import uvicorn

    uvicorn.run(
        "yt_transcript_service.main:app",
        host=container.config.server.host(),
        port=container.config.server.port(),
        reload=False,
    )


if __name__ == "__main__":
    run()
