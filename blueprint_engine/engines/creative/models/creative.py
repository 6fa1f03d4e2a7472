"""Creative engine input and blueprint models."""

from pydantic import Field

from blueprint_engine.models.common import BlueprintRecord, EngineInput

from ..templates.creative_templates import PROMPT_SLOTS


class CreativeInput(EngineInput):
    """
    크리에이티브 엔진 입력 레코드.

    palette 항목은 색상 코드로 검증하지 않고 문자 그대로 사용합니다.
    """
    brand_name: str = Field("", description="브랜드 아이덴티티")
    product: str = Field("", description="제품 또는 경험")
    audience: str = Field("", description="주요 대상")
    mood: str = Field("", description="무드 & 톤")
    keywords: list[str] = Field(default_factory=list, description="비주얼 키워드")
    palette: list[str] = Field(default_factory=list, description="컬러 팔레트")
    differentiators: list[str] = Field(default_factory=list, description="차별화 요소")


class Narrative(BlueprintRecord):
    """서사 아키텍처."""
    positioning: str
    voice: str
    promise: str


class PromptSet(BlueprintRecord):
    """
    이미지 생성 프롬프트 5종.

    키 집합이 고정되도록 열린 매핑 대신 필드로 정의합니다.
    JSON 키: hero, background, branding, ux, threeD
    """
    hero: str
    background: str
    branding: str
    ux: str
    three_d: str


class LayoutFramework(BlueprintRecord):
    """레이아웃 프레임워크."""
    grid: str
    spacing: str
    breakpoints: tuple[str, ...]
    notes: tuple[str, ...]


class ComponentSpec(BlueprintRecord):
    """컴포넌트 정의."""
    name: str
    usage: str
    states: tuple[str, ...]
    dataset: tuple[str, ...]


class ExperienceFlow(BlueprintRecord):
    """경험 흐름."""
    name: str
    touchpoints: tuple[str, ...]
    success: str


class FigmaSystem(BlueprintRecord):
    """Figma 블루프린트."""
    layout: LayoutFramework
    components: tuple[ComponentSpec, ...]
    flows: tuple[ExperienceFlow, ...]


class CopyDeck(BlueprintRecord):
    """카피 덱."""
    hero: str
    subheading: str
    ctas: tuple[str, ...]
    value_props: tuple[str, ...]
    onboarding: str


class PaletteToken(BlueprintRecord):
    """컬러 토큰. value는 입력 문자열 그대로입니다."""
    name: str
    value: str
    usage: str


class TypographyToken(BlueprintRecord):
    """타이포그래피 토큰."""
    role: str
    font: str
    specs: str


class StyleGuide(BlueprintRecord):
    """스타일 & 모션 가이드."""
    palette: tuple[PaletteToken, ...]
    typography: tuple[TypographyToken, ...]
    imagery: tuple[str, ...]
    motion: tuple[str, ...]
    iconography: tuple[str, ...]


class CreativeBlueprint(BlueprintRecord):
    """크리에이티브 블루프린트 (생성 결과 전체)."""
    narrative: Narrative
    prompts: PromptSet
    figma_system: FigmaSystem
    content: CopyDeck
    style_guide: StyleGuide
    recommendations: tuple[str, ...]

    def to_markdown(self, title: str = "Creative Blueprint") -> str:
        """마크다운 포맷으로 변환하는 함수"""
        lines = [f"# {title}", ""]

        # 1. 서사
        lines.append("## Narrative architecture")
        lines.append("")
        lines.append(f"- **Positioning**: {self.narrative.positioning}")
        lines.append(f"- **Voice**: {self.narrative.voice}")
        lines.append(f"- **Promise**: {self.narrative.promise}")
        lines.append("")

        # 2. 프롬프트
        lines.append("## Midjourney production prompts")
        lines.append("")
        for slot in PROMPT_SLOTS:
            lines.append(f"### {slot.label}")
            lines.append(f"```\n{getattr(self.prompts, slot.key)}\n```")
            lines.append("")

        # 3. Figma 블루프린트
        figma = self.figma_system
        lines.append("## Figma blueprint")
        lines.append("")
        lines.append("### Layout framework")
        lines.append(f"- Grid: {figma.layout.grid}")
        lines.append(f"- Spacing: {figma.layout.spacing}")
        lines.extend(f"- Breakpoint: {bp}" for bp in figma.layout.breakpoints)
        lines.extend(f"- Note: {note}" for note in figma.layout.notes)
        lines.append("")
        lines.append("### Component system")
        lines.append("")
        for component in figma.components:
            lines.append(f"#### {component.name}")
            lines.append(component.usage)
            lines.append(f"**States**: {', '.join(component.states)}")
            lines.extend(f"- {row}" for row in component.dataset)
            lines.append("")
        lines.append("### Experience flows")
        lines.append("")
        for flow in figma.flows:
            lines.append(f"#### {flow.name}")
            lines.extend(f"{idx}. {tp}" for idx, tp in enumerate(flow.touchpoints, 1))
            lines.append(f"**Success**: {flow.success}")
            lines.append("")

        # 4. 카피 덱
        lines.append("## Copy deck")
        lines.append("")
        lines.append(f"**Hero**: {self.content.hero}")
        lines.append("")
        lines.append(f"**Subheading**: {self.content.subheading}")
        lines.append("")
        lines.append("### Primary CTAs")
        lines.extend(f"- {cta}" for cta in self.content.ctas)
        lines.append("")
        lines.append("### Value propositions")
        lines.extend(f"- {prop}" for prop in self.content.value_props)
        lines.append("")
        lines.append("### Onboarding narrative")
        lines.append(self.content.onboarding)
        lines.append("")

        # 5. 스타일 가이드
        guide = self.style_guide
        lines.append("## Style & motion spec")
        lines.append("")
        lines.append("| Token | Value | Usage |")
        lines.append("|-------|-------|-------|")
        for token in guide.palette:
            lines.append(f"| {token.name} | `{token.value}` | {token.usage} |")
        lines.append("")
        lines.append("### Typography")
        lines.extend(f"- {t.role} · {t.font} · {t.specs}" for t in guide.typography)
        lines.append("")
        for label, items in (
            ("Imagery", guide.imagery),
            ("Motion", guide.motion),
            ("Iconography", guide.iconography),
        ):
            lines.append(f"### {label}")
            lines.extend(f"- {item}" for item in items)
            lines.append("")

        # 6. 권고사항
        lines.append("## Activation recommendations")
        lines.append("")
        lines.extend(f"- {rec}" for rec in self.recommendations)
        lines.append("")

        # 바닥글
        lines.append("---")
        lines.append("*Generated by the Creative Intelligence Engine.*")

        return "\n".join(lines)

    def to_json(self) -> str:
        """JSON 포맷으로 변환하는 함수 (camelCase 키)"""
        return self.model_dump_json(indent=2, by_alias=True)
