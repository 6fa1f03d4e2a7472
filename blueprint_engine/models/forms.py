"""
원시 폼 입력 모델입니다.
여러 줄 / 쉼표 구분 텍스트를 그대로 받아서 생성기 입력 레코드로 변환합니다.

기본값은 화면의 초기 폼 값과 같으며, 기본값으로 만든 폼이 곧 "Reset" 상태입니다.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from blueprint_engine.engines.creative.models import CreativeInput
from blueprint_engine.engines.project.models import ProjectInput
from blueprint_engine.utils.validation import tokenize_field, validate_field_length


class RawForm(BaseModel):
    """원시 폼 기반 클래스. JSON에서는 camelCase 이름을 사용합니다."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def _text(self, field_name: str) -> str:
        return validate_field_length(field_name, getattr(self, field_name))

    def _items(self, field_name: str) -> list[str]:
        return tokenize_field(field_name, getattr(self, field_name))


class ProjectForm(RawForm):
    """프로젝트 엔진 입력 폼."""

    name: str = Field("Command Atlas Transformation", description="이니셔티브 이름")
    vision: str = Field(
        "Launch a unified command center so enterprise leaders can orchestrate growth "
        "and operations from a single canvas.",
        description="비전 서술",
    )
    industry: str = Field("Enterprise SaaS", description="산업 맥락")
    timeframe: str = Field("16-week sprint program", description="기간")
    budget: str = Field("$1.8M envelope", description="예산 가이드레일")
    goals: str = Field(
        "Compress decision cycles for executives\n"
        "Digitize cross-functional playbooks\n"
        "Prove measurable ROI within one quarter",
        description="주요 목표 (줄바꿈 또는 쉼표 구분)",
    )
    kpis: str = Field(
        "Decision cycle time\nAdoption across regions\nNet promoter score uplift",
        description="성공 KPI",
    )
    stakeholders: str = Field(
        "Chief Strategy Officer\nVP Product\nHead of RevOps\nPMO Director",
        description="이해관계자 및 스폰서",
    )
    team: str = Field(
        "Program Director\nProduct Strategist\nDesign Architect\nLead Engineer\nChange Lead",
        description="핵심 팀 역량",
    )
    constraints: str = Field(
        "Complex legacy systems\nCompressed go-live timeline\nStrict compliance reviews",
        description="제약 및 주의사항",
    )

    def to_input(self) -> ProjectInput:
        """
        폼을 ProjectInput으로 변환합니다.

        Raises:
            InputValidationError: 필드 길이 또는 항목 수 초과
        """
        return ProjectInput(
            name=self._text("name"),
            vision=self._text("vision"),
            industry=self._text("industry"),
            timeframe=self._text("timeframe"),
            budget=self._text("budget"),
            goals=self._items("goals"),
            kpis=self._items("kpis"),
            stakeholders=self._items("stakeholders"),
            team=self._items("team"),
            constraints=self._items("constraints"),
        )


class CreativeForm(RawForm):
    """크리에이티브 엔진 입력 폼."""

    brand_name: str = Field("Omar Atlas", description="브랜드 아이덴티티")
    product: str = Field("strategic operating system for visionary founders", description="제품 또는 경험")
    audience: str = Field("design-forward CEOs and product leaders", description="주요 대상")
    mood: str = Field("minimal, cinematic, confident", description="무드 & 톤")
    keywords: str = Field(
        "premium\narchitectural lighting\nneofuturism\nnegative space",
        description="비주얼 키워드",
    )
    palette: str = Field(
        "#080C14\n#121C2B\n#2D4059\n#8EA7C2\n#F7F9FC",
        description="컬러 팔레트 (HEX 또는 색상 설명)",
    )
    differentiators: str = Field(
        "Narrative-driven decisions\nCommand center intelligence\nTailored brand-to-build handoff",
        description="차별화 요소",
    )

    def to_input(self) -> CreativeInput:
        """
        폼을 CreativeInput으로 변환합니다.

        Raises:
            InputValidationError: 필드 길이 또는 항목 수 초과
        """
        return CreativeInput(
            brand_name=self._text("brand_name"),
            product=self._text("product"),
            audience=self._text("audience"),
            mood=self._text("mood"),
            keywords=self._items("keywords"),
            palette=self._items("palette"),
            differentiators=self._items("differentiators"),
        )
