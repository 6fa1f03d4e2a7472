"""
프로젝트 엔진 API입니다.
이니셔티브 정보를 받아 프로그램 관리 블루프린트를 생성하고 내보냅니다.
"""

from fastapi import APIRouter
from fastapi.responses import Response

from blueprint_engine.api.responses import export_response
from blueprint_engine.engines.project.models import ProjectInput
from blueprint_engine.models.forms import ProjectForm
from blueprint_engine.services import get_project_generator

router = APIRouter()


@router.get("/defaults")
async def get_project_defaults() -> dict:
    """기본 폼 값 (Reset 상태) 조회"""
    return ProjectForm().model_dump(by_alias=True)


@router.post("/blueprint")
async def create_project_blueprint(project: ProjectInput) -> dict:
    """토큰화된 입력으로 블루프린트 생성"""
    blueprint = get_project_generator().generate(project)
    return blueprint.model_dump(by_alias=True)


@router.post("/blueprint/form")
async def create_project_blueprint_from_form(form: ProjectForm) -> dict:
    """
    원시 폼 입력으로 블루프린트 생성.
    목록 필드는 줄바꿈 또는 쉼표로 구분된 텍스트입니다.
    """
    blueprint = get_project_generator().generate(form.to_input())
    return blueprint.model_dump(by_alias=True)


@router.post("/blueprint/export")
async def export_project_blueprint(
    project: ProjectInput,
    format: str = "markdown",
    title: str = "Project Blueprint",
) -> Response:
    """블루프린트를 생성하여 파일(markdown / json / pptx)로 다운로드"""
    blueprint = get_project_generator().generate(project)
    return export_response(blueprint, format, filename="project-blueprint", title=title)
