"""
헬스 체크(Health Check) 엔드포인트입니다.
서버가 살아서 정상적으로 응답하는지 확인하는 용도입니다.
"""

from fastapi import APIRouter

from blueprint_engine.config import get_settings

router = APIRouter()


@router.get("")
async def health_check():
    """
    기본 상태 확인 함수.
    서버가 켜져 있으면 {"status": "healthy"}를 반환합니다.
    """
    return {"status": "healthy"}


@router.get("/detail")
async def health_check_detail():
    """
    상세 상태 확인 함수.
    현재 설정 정보(버전, 입력 제한 등)도 같이 보여줍니다.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "engines": ["project", "creative"],
        "config": {
            "max_field_length": settings.max_field_length,  # 필드 최대 글자 수
            "max_items_per_field": settings.max_items_per_field,  # 필드당 최대 항목 수
            "log_level": settings.log_level,
        }
    }
