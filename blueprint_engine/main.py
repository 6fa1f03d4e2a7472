"""
블루프린트 엔진의 메인 진입점 파일입니다.
웹 서버 애플리케이션을 생성하고 설정하는 역할을 담당합니다.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from blueprint_engine import __version__
from blueprint_engine.config import get_settings
from blueprint_engine.api.router import api_router
from blueprint_engine.exceptions import (
    BlueprintEngineError,
    InputValidationError,
    UnsupportedFormatError,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션의 생명주기(시작과 종료)를 관리하는 함수입니다.

    생성기는 상태가 없으므로 시작/종료 시 로그만 남깁니다.
    """
    settings = get_settings()
    logger.info(f"{settings.app_name}이 다음 주소에서 시작됩니다: {settings.host}:{settings.port}")

    yield

    logger.info(f"{settings.app_name}이 종료됩니다")


def create_app() -> FastAPI:
    """
    FastAPI 웹 애플리케이션을 생성하고 설정하는 함수입니다.

    주요 기능:
    1. 로깅 설정
    2. CORS 설정 (프론트엔드와의 통신 허용 설정)
    3. 예외 핸들러 등록
    4. API 라우터 연결 (엔진별 주소 연결)
    """
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="입력 폼을 프로젝트 / 크리에이티브 블루프린트로 변환하는 결정적 생성 엔진",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",  # 개발자용 문서 주소
        redoc_url="/redoc",
    )

    # CORS 미들웨어 설정: 프론트엔드 웹페이지가 이 서버에 접속할 수 있도록 허용하는 설정입니다.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 글로벌 예외 핸들러: 커스텀 예외를 구조화된 JSON 응답으로 변환
    @app.exception_handler(BlueprintEngineError)
    async def blueprint_error_handler(request: Request, exc: BlueprintEngineError):
        client_error = isinstance(exc, (InputValidationError, UnsupportedFormatError))
        status_code = 400 if client_error else 500
        if not client_error:
            logger.error(f"블루프린트 처리 오류 [{exc.error_code}]: {exc.message}")
        return JSONResponse(
            status_code=status_code,
            content={
                "error_code": exc.error_code,
                "message": exc.message,
                "details": exc.details,
                "timestamp": datetime.now().isoformat(),
            },
        )

    @app.exception_handler(Exception)
    async def general_error_handler(request: Request, exc: Exception):
        logger.error(f"처리되지 않은 예외: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error_code": "ERR_INTERNAL",
                "message": "내부 서버 오류가 발생했습니다",
                "details": None,
                "timestamp": datetime.now().isoformat(),
            },
        )

    # API 라우터 포함: /api/v1 주소 아래에 모든 기능을 연결합니다.
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/")
    async def root():
        """
        루트 엔드포인트: 서버가 정상적으로 동작하는지 확인하는 기본 주소입니다.
        접속 시 서버의 기본 정보를 반환합니다.
        """
        return {
            "name": settings.app_name,
            "version": __version__,
            "description": "프로젝트 / 크리에이티브 블루프린트 생성",
            "engines": ["project", "creative"],
            "docs": "/docs",
            "api": "/api/v1",
        }

    return app


# 애플리케이션 인스턴스 생성
app = create_app()


# 이 파일을 직접 실행했을 때 서버를 구동시키는 코드입니다.
if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "blueprint_engine.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,  # 코드가 변경되면 자동으로 재시작 (개발 모드)
    )
