"""Creative blueprint generator - turns a brand brief into a creative production kit."""

import logging

from blueprint_engine.engines.base_generator import BaseGenerator

from .derivations import (
    build_context,
    derive_content,
    derive_figma_system,
    derive_narrative,
    derive_prompts,
    derive_recommendations,
    derive_style_guide,
)
from .models import CreativeBlueprint, CreativeInput

logger = logging.getLogger(__name__)


class CreativeBlueprintGenerator(BaseGenerator[CreativeInput, CreativeBlueprint]):
    """CreativeInput을 기반으로 브랜드/디자인 블루프린트 생성."""

    _generator_name = "CreativeBlueprintGenerator"

    def _do_generate(self, input_doc: CreativeInput) -> CreativeBlueprint:
        ctx = build_context(input_doc)

        # 1. 서사 + 프롬프트
        narrative = derive_narrative(ctx)
        prompts = derive_prompts(ctx)

        # 2. Figma 시스템
        figma_system = derive_figma_system(ctx)
        logger.debug(
            f"[{self._generator_name}] Figma: 컴포넌트 {len(figma_system.components)}개, "
            f"플로우 {len(figma_system.flows)}개"
        )

        # 3. 카피 덱
        content = derive_content(ctx)

        # 4. 스타일 가이드
        style_guide = derive_style_guide(ctx)
        logger.debug(f"[{self._generator_name}] 팔레트 토큰 {len(style_guide.palette)}개")

        return CreativeBlueprint(
            narrative=narrative,
            prompts=prompts,
            figma_system=figma_system,
            content=content,
            style_guide=style_guide,
            recommendations=derive_recommendations(ctx),
        )
