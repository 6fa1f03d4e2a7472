"""Shared generator instances.

생성기는 상태를 갖지 않으므로 프로세스 전체에서 인스턴스 하나를 재사용합니다.
"""

from typing import Optional

from blueprint_engine.engines.creative import CreativeBlueprintGenerator
from blueprint_engine.engines.project import ProjectBlueprintGenerator

# 싱글톤 인스턴스
_project_generator: Optional[ProjectBlueprintGenerator] = None
_creative_generator: Optional[CreativeBlueprintGenerator] = None


def get_project_generator() -> ProjectBlueprintGenerator:
    """ProjectBlueprintGenerator 싱글톤 인스턴스 반환."""
    global _project_generator
    if _project_generator is None:
        _project_generator = ProjectBlueprintGenerator()
    return _project_generator


def get_creative_generator() -> CreativeBlueprintGenerator:
    """CreativeBlueprintGenerator 싱글톤 인스턴스 반환."""
    global _creative_generator
    if _creative_generator is None:
        _creative_generator = CreativeBlueprintGenerator()
    return _creative_generator
