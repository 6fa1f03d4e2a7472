"""
API 라우터 설정 파일입니다.
각 엔진별로 나누어진 API 주소들을 하나로 모으는 역할을 합니다.
"""

from fastapi import APIRouter

from blueprint_engine.api.endpoints import health, project, creative

# 메인 API 라우터 생성
api_router = APIRouter()

# 헬스 체크 엔드포인트: 서버 상태 확인용 (/health)
api_router.include_router(
    health.router,
    prefix="/health",
    tags=["health"]
)

# 프로젝트 엔진 엔드포인트: 프로그램 관리 블루프린트 생성 (/project)
api_router.include_router(
    project.router,
    prefix="/project",
    tags=["project"]
)

# 크리에이티브 엔진 엔드포인트: 브랜드/디자인 블루프린트 생성 (/creative)
api_router.include_router(
    creative.router,
    prefix="/creative",
    tags=["creative"]
)
