"""PPT deck exporter for project and creative blueprints.

블루프린트를 다크 테마 PPT(.pptx) 바이트로 렌더링합니다.
"""

import logging
import re
from io import BytesIO
from typing import Sequence, Union

from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.shapes import MSO_SHAPE
from pptx.enum.text import PP_ALIGN
from pptx.util import Inches, Pt

from blueprint_engine.engines.creative.models import CreativeBlueprint, PaletteToken
from blueprint_engine.engines.creative.templates.creative_templates import PROMPT_SLOTS
from blueprint_engine.engines.project.models import ProjectBlueprint, RaciEntry, Risk
from blueprint_engine.exceptions import ExportError

logger = logging.getLogger(__name__)

# 다크 테마 컬러
COLORS = {
    "background": "1E1E2E",
    "surface": "2D2D3F",
    "primary": "7C3AED",
    "secondary": "06B6D4",
    "text_primary": "FFFFFF",
    "text_secondary": "A0AEC0",
    "success": "10B981",
    "warning": "F59E0B",
}

# 확률별 강조 색상
PROBABILITY_COLORS = {
    "High": COLORS["warning"],
    "Medium": COLORS["secondary"],
    "Low": COLORS["success"],
}

HEX_COLOR_PATTERN = re.compile(r"^#?[0-9A-Fa-f]{6}$")

MAX_BULLETS = 8
MAX_RISKS = 5
MAX_SWATCHES = 10


def hex_to_rgb(hex_color: str) -> RGBColor:
    """Hex 컬러를 RGBColor로 변환."""
    hex_color = hex_color.lstrip('#')
    return RGBColor(
        int(hex_color[0:2], 16),
        int(hex_color[2:4], 16),
        int(hex_color[4:6], 16)
    )


def is_hex_color(token: str) -> bool:
    """6자리 hex 색상 코드인지 확인 (#은 선택)."""
    return bool(HEX_COLOR_PATTERN.match(token.strip()))


def set_slide_background(slide, color_hex: str):
    """슬라이드 배경색 설정."""
    fill = slide.background.fill
    fill.solid()
    fill.fore_color.rgb = hex_to_rgb(color_hex)


def new_slide(prs):
    """빈 레이아웃 슬라이드를 추가하고 배경을 칠합니다."""
    slide = prs.slides.add_slide(prs.slide_layouts[6])  # Blank
    set_slide_background(slide, COLORS["background"])
    return slide


def add_slide_title(slide, title: str):
    title_box = slide.shapes.add_textbox(Inches(0.5), Inches(0.3), Inches(9), Inches(0.7))
    p = title_box.text_frame.paragraphs[0]
    p.text = title
    p.font.size = Pt(30)
    p.font.bold = True
    p.font.color.rgb = hex_to_rgb(COLORS["text_primary"])


def add_title_slide(prs, title: str, subtitle: str = ""):
    """표지 슬라이드 추가."""
    slide = new_slide(prs)

    title_box = slide.shapes.add_textbox(Inches(0.5), Inches(2.8), Inches(9), Inches(1.5))
    tf = title_box.text_frame
    tf.word_wrap = True
    p = tf.paragraphs[0]
    p.text = title
    p.font.size = Pt(44)
    p.font.bold = True
    p.font.color.rgb = hex_to_rgb(COLORS["text_primary"])
    p.alignment = PP_ALIGN.CENTER

    if subtitle:
        subtitle_box = slide.shapes.add_textbox(Inches(0.5), Inches(4.4), Inches(9), Inches(1.2))
        tf = subtitle_box.text_frame
        tf.word_wrap = True
        p = tf.paragraphs[0]
        p.text = subtitle
        p.font.size = Pt(20)
        p.font.color.rgb = hex_to_rgb(COLORS["text_secondary"])
        p.alignment = PP_ALIGN.CENTER

    return slide


def add_content_slide(prs, title: str, bullets: Sequence[str]):
    """내용 슬라이드 (제목 + 불릿 리스트)."""
    slide = new_slide(prs)
    add_slide_title(slide, title)

    content_box = slide.shapes.add_textbox(Inches(0.5), Inches(1.3), Inches(9), Inches(5.8))
    tf = content_box.text_frame
    tf.word_wrap = True

    for i, bullet in enumerate(bullets[:MAX_BULLETS]):
        p = tf.paragraphs[0] if i == 0 else tf.add_paragraph()
        p.text = f"• {bullet}"
        p.font.size = Pt(16)
        p.font.color.rgb = hex_to_rgb(COLORS["text_secondary"])
        p.space_before = Pt(8)

    return slide


def add_risk_table_slide(prs, title: str, risks: Sequence[Risk]):
    """리스크 슬라이드 (확률 + 리스크 + 완화 방안)."""
    slide = new_slide(prs)
    add_slide_title(slide, title)

    for i, risk in enumerate(risks[:MAX_RISKS]):
        y = 1.2 + (i * 1.15)

        box = slide.shapes.add_shape(MSO_SHAPE.ROUNDED_RECTANGLE,
                                     Inches(0.3), Inches(y), Inches(9.4), Inches(1.05))
        box.fill.solid()
        box.fill.fore_color.rgb = hex_to_rgb(COLORS["surface"])
        box.line.fill.background()

        # 확률 표시
        probability_box = slide.shapes.add_textbox(Inches(0.4), Inches(y + 0.1), Inches(1.0), Inches(0.4))
        p = probability_box.text_frame.paragraphs[0]
        p.text = risk.probability.upper()
        p.font.size = Pt(12)
        p.font.bold = True
        p.font.color.rgb = hex_to_rgb(PROBABILITY_COLORS.get(risk.probability, COLORS["secondary"]))

        risk_box = slide.shapes.add_textbox(Inches(1.5), Inches(y + 0.1), Inches(8.0), Inches(0.4))
        p = risk_box.text_frame.paragraphs[0]
        p.text = risk.title
        p.font.size = Pt(14)
        p.font.bold = True
        p.font.color.rgb = hex_to_rgb(COLORS["text_primary"])

        mitigation_box = slide.shapes.add_textbox(Inches(1.5), Inches(y + 0.5), Inches(8.0), Inches(0.5))
        tf = mitigation_box.text_frame
        tf.word_wrap = True
        p = tf.paragraphs[0]
        p.text = f"→ {risk.mitigation}"
        p.font.size = Pt(12)
        p.font.color.rgb = hex_to_rgb(COLORS["text_secondary"])

    return slide


def add_raci_slide(prs, title: str, entries: Sequence[RaciEntry]):
    """RACI 매트릭스 테이블 슬라이드."""
    slide = new_slide(prs)
    add_slide_title(slide, title)

    headers = ("Activity", "Responsible", "Accountable", "Consulted", "Informed")
    shape = slide.shapes.add_table(len(entries) + 1, len(headers),
                                   Inches(0.3), Inches(1.2), Inches(9.4), Inches(0.5 * (len(entries) + 1)))
    table = shape.table

    rows = [headers] + [
        (entry.activity, entry.responsible, entry.accountable, entry.consulted, entry.informed)
        for entry in entries
    ]
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            cell = table.cell(r, c)
            cell.text = value
            cell.fill.solid()
            cell.fill.fore_color.rgb = hex_to_rgb(COLORS["primary"] if r == 0 else COLORS["surface"])
            p = cell.text_frame.paragraphs[0]
            p.font.size = Pt(11)
            p.font.bold = r == 0
            p.font.color.rgb = hex_to_rgb(COLORS["text_primary"])

    return slide


def add_palette_slide(prs, title: str, tokens: Sequence[PaletteToken]):
    """
    팔레트 스와치 슬라이드.

    6자리 hex 토큰만 해당 색으로 채우고, 그 외 토큰은 중립 색상에
    입력 문자열을 라벨로 표시합니다.
    """
    slide = new_slide(prs)
    add_slide_title(slide, title)

    for i, token in enumerate(tokens[:MAX_SWATCHES]):
        row = i // 5
        col = i % 5
        x = 0.4 + (col * 1.9)
        y = 1.3 + (row * 2.9)

        swatch = slide.shapes.add_shape(MSO_SHAPE.ROUNDED_RECTANGLE,
                                        Inches(x), Inches(y), Inches(1.7), Inches(1.7))
        swatch.fill.solid()
        fill_hex = token.value.strip() if is_hex_color(token.value) else COLORS["surface"]
        swatch.fill.fore_color.rgb = hex_to_rgb(fill_hex)
        swatch.line.color.rgb = hex_to_rgb(COLORS["text_secondary"])

        label_box = slide.shapes.add_textbox(Inches(x), Inches(y + 1.8), Inches(1.7), Inches(0.8))
        tf = label_box.text_frame
        tf.word_wrap = True
        p = tf.paragraphs[0]
        p.text = token.name
        p.font.size = Pt(14)
        p.font.bold = True
        p.font.color.rgb = hex_to_rgb(COLORS["text_primary"])
        p = tf.add_paragraph()
        p.text = token.value
        p.font.size = Pt(12)
        p.font.color.rgb = hex_to_rgb(COLORS["text_secondary"])

    return slide


def new_presentation():
    prs = Presentation()
    prs.slide_width = Inches(10)
    prs.slide_height = Inches(7.5)
    return prs


def build_project_deck(blueprint: ProjectBlueprint, title: str = "Project Blueprint"):
    """프로젝트 블루프린트 덱 구성."""
    prs = new_presentation()
    arch = blueprint.architecture

    add_title_slide(prs, title, blueprint.summary.north_star)
    add_content_slide(prs, "North-star narrative", [blueprint.summary.positioning, *blueprint.summary.value_streams])
    add_content_slide(prs, "Program architecture", [arch.scope, *arch.objectives])
    add_content_slide(prs, "KPIs & deliverables", [*arch.kpis, *arch.deliverables])
    add_content_slide(prs, "Work breakdown structure", [
        f"{workstream.title} · {workstream.owner}" for workstream in arch.wbs
    ])
    add_content_slide(prs, "Execution pathway", [
        f"{phase.name}: {phase.focus}" for phase in blueprint.execution_path
    ])
    add_content_slide(prs, "Milestones & cadence", arch.milestones)
    add_risk_table_slide(prs, "Risks & dependencies", arch.risks)
    add_raci_slide(prs, "RACI Matrix", blueprint.documents.raci)
    add_content_slide(prs, "Roadmap", [
        f"{entry.horizon}: {'; '.join(entry.outcomes)}" for entry in blueprint.documents.roadmap
    ])
    add_content_slide(prs, "Strategic recommendations", blueprint.recommendations)
    return prs


def build_creative_deck(blueprint: CreativeBlueprint, title: str = "Creative Blueprint"):
    """크리에이티브 블루프린트 덱 구성."""
    prs = new_presentation()
    narrative = blueprint.narrative
    figma = blueprint.figma_system
    guide = blueprint.style_guide

    add_title_slide(prs, title, blueprint.content.hero)
    add_content_slide(prs, "Narrative architecture", [
        f"Positioning: {narrative.positioning}",
        f"Voice: {narrative.voice}",
        f"Promise: {narrative.promise}",
    ])
    add_content_slide(prs, "Midjourney production prompts", [
        f"{slot.label}: {getattr(blueprint.prompts, slot.key)}" for slot in PROMPT_SLOTS
    ])
    add_content_slide(prs, "Figma blueprint", [
        f"Grid: {figma.layout.grid}",
        f"Spacing: {figma.layout.spacing}",
    ] + [f"{component.name}: {component.usage}" for component in figma.components])
    add_content_slide(prs, "Experience flows", [
        f"{flow.name}: {' → '.join(flow.touchpoints)}" for flow in figma.flows
    ])
    add_content_slide(prs, "Copy deck", [
        blueprint.content.subheading,
        *blueprint.content.ctas,
        *blueprint.content.value_props,
    ])
    add_palette_slide(prs, "Color palette", guide.palette)
    add_content_slide(prs, "Typography & motion", [
        f"{token.role} · {token.font} · {token.specs}" for token in guide.typography
    ] + list(guide.motion))
    add_content_slide(prs, "Activation recommendations", blueprint.recommendations)
    return prs


def export_deck(blueprint: Union[ProjectBlueprint, CreativeBlueprint], title: str = "") -> bytes:
    """
    블루프린트를 .pptx 바이트로 렌더링합니다.

    Raises:
        ExportError: 렌더링 실패
    """
    try:
        if isinstance(blueprint, ProjectBlueprint):
            prs = build_project_deck(blueprint, title or "Project Blueprint")
        else:
            prs = build_creative_deck(blueprint, title or "Creative Blueprint")
        buffer = BytesIO()
        prs.save(buffer)
    except Exception as e:
        logger.error(f"[DeckExporter] PPT 렌더링 실패: {e}")
        raise ExportError("PPT 렌더링에 실패했습니다", details={"reason": str(e)}) from e

    logger.info(f"[DeckExporter] 슬라이드 {len(prs.slides)}장 렌더링 완료")
    return buffer.getvalue()
