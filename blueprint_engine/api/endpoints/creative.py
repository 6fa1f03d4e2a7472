"""
크리에이티브 엔진 API입니다.
브랜드 브리프를 받아 프롬프트, Figma 시스템, 카피, 스타일 가이드를 생성합니다.
"""

from fastapi import APIRouter
from fastapi.responses import Response

from blueprint_engine.api.responses import export_response
from blueprint_engine.engines.creative.models import CreativeInput
from blueprint_engine.models.forms import CreativeForm
from blueprint_engine.services import get_creative_generator

router = APIRouter()


@router.get("/defaults")
async def get_creative_defaults() -> dict:
    """기본 폼 값 (Reset 상태) 조회"""
    return CreativeForm().model_dump(by_alias=True)


@router.post("/blueprint")
async def create_creative_blueprint(creative: CreativeInput) -> dict:
    """토큰화된 입력으로 블루프린트 생성"""
    blueprint = get_creative_generator().generate(creative)
    return blueprint.model_dump(by_alias=True)


@router.post("/blueprint/form")
async def create_creative_blueprint_from_form(form: CreativeForm) -> dict:
    """원시 폼 입력으로 블루프린트 생성"""
    blueprint = get_creative_generator().generate(form.to_input())
    return blueprint.model_dump(by_alias=True)


@router.post("/blueprint/export")
async def export_creative_blueprint(
    creative: CreativeInput,
    format: str = "markdown",
    title: str = "Creative Blueprint",
) -> Response:
    """블루프린트를 생성하여 파일(markdown / json / pptx)로 다운로드"""
    blueprint = get_creative_generator().generate(creative)
    return export_response(blueprint, format, filename="creative-blueprint", title=title)
