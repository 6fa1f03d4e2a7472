"""Project blueprint generator - expands a project intent into a program blueprint."""

import logging

from blueprint_engine.engines.base_generator import BaseGenerator
from blueprint_engine.utils.text import meaningful

from .derivations import (
    build_context,
    derive_architecture,
    derive_documents,
    derive_execution_path,
    derive_recommendations,
    derive_summary,
)
from .models import ProjectBlueprint, ProjectInput

logger = logging.getLogger(__name__)


class ProjectBlueprintGenerator(BaseGenerator[ProjectInput, ProjectBlueprint]):
    """ProjectInput을 기반으로 프로그램 관리 블루프린트 생성."""

    _generator_name = "ProjectBlueprintGenerator"

    def _do_generate(self, input_doc: ProjectInput) -> ProjectBlueprint:
        ctx = build_context(input_doc)

        # 1. North-star 서사
        summary = derive_summary(ctx)

        # 2. 프로그램 아키텍처 (범위, WBS, 마일스톤, 리스크)
        architecture = derive_architecture(ctx)
        logger.debug(
            f"[{self._generator_name}] 아키텍처: 워크스트림 {len(architecture.wbs)}개, "
            f"리스크 {len(architecture.risks)}개"
        )

        # 3. 실행 경로
        execution_path = derive_execution_path(ctx)

        # 4. 문서 (헌장, SOW, RACI, 타임라인, 로드맵)
        documents = derive_documents(ctx, architecture, execution_path)
        logger.debug(f"[{self._generator_name}] RACI 행 {len(documents.raci)}개")

        # 5. 권고사항
        recommendations = derive_recommendations(ctx, meaningful(input_doc.kpis))

        return ProjectBlueprint(
            summary=summary,
            architecture=architecture,
            execution_path=execution_path,
            documents=documents,
            recommendations=recommendations,
        )
