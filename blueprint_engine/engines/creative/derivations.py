"""Creative blueprint derivation rules: deterministic, no randomness.

Palette tokens are copied as literal text. They are never parsed as colors.
"""

from dataclasses import dataclass

from blueprint_engine.utils.text import (
    contains_term,
    dedupe,
    human_join,
    lower_first,
    meaningful,
    or_default,
    pick,
    sentence,
    split_terms,
    strip_sentence,
    upper_first,
)

from .models import (
    ComponentSpec,
    CopyDeck,
    CreativeInput,
    ExperienceFlow,
    FigmaSystem,
    LayoutFramework,
    Narrative,
    PaletteToken,
    PromptSet,
    StyleGuide,
    TypographyToken,
)
from .templates.creative_templates import (
    BREAKPOINTS,
    COMPONENT_CATALOG,
    DEFAULT_FONT_PAIRING,
    DEFAULT_PALETTE,
    DEFAULT_RECOMMENDATIONS,
    DEFAULT_VALUE_PROPS,
    FALLBACK_AUDIENCE,
    FALLBACK_BRAND,
    FALLBACK_DIFFERENTIATOR,
    FALLBACK_KEYWORD,
    FALLBACK_MOOD,
    FALLBACK_PRODUCT,
    FALLBACK_VOICE_KEYWORDS,
    FLOW_CATALOG,
    FONT_PAIRINGS,
    FontPairing,
    ICONOGRAPHY_TEMPLATES,
    IMAGERY_TEMPLATES,
    LAYOUT_GRID,
    LAYOUT_SPACING,
    MAX_DIFFERENTIATORS,
    MAX_KEYWORDS,
    MIN_KEYWORDS,
    MIN_PALETTE,
    MOTION_TEMPLATES,
    PALETTE_ROLES,
    PALETTE_USAGE,
    PROMPT_KEYWORD_LIMIT,
    PROMPT_PALETTE_LIMIT,
    PROMPT_SLOTS,
    RECOMMENDATION_COUNT,
    TYPE_SCALE,
    VALUE_PROP_CLAUSES,
    VALUE_PROP_COUNT,
    VOICE_KEYWORD_LIMIT,
)

_ARTICLES = ("a ", "an ", "the ")


@dataclass(frozen=True)
class CreativeContext:
    """입력 필드에 기본 문구를 적용한 생성 컨텍스트."""

    brand: str
    product: str
    audience: str
    mood: str
    mood_terms: tuple[str, ...]
    keywords: tuple[str, ...]
    palette: tuple[str, ...]
    differentiators: tuple[str, ...]

    @property
    def mood_phrase(self) -> str:
        """예시: "minimal, cinematic, and confident"."""
        return human_join(self.mood_terms)

    @property
    def mood_first(self) -> str:
        return lower_first(self.mood_terms[0])

    @property
    def swatches(self) -> tuple[str, ...]:
        """스타일 가이드에 쓰는 팔레트. 입력이 비어 있으면 기본 팔레트."""
        return self.palette or DEFAULT_PALETTE

    @property
    def lead_keyword(self) -> str:
        return pick(list(self.keywords), 0, FALLBACK_KEYWORD)

    @property
    def lead_differentiator(self) -> str:
        return lower_first(strip_sentence(pick(list(self.differentiators), 0, FALLBACK_DIFFERENTIATOR)))


def build_context(creative: CreativeInput) -> CreativeContext:
    """
    CreativeInput에 기본 문구를 적용하여 컨텍스트를 만듭니다.

    구두점만 있는 값과 항목은 빈 값으로 취급합니다.
    """
    mood_terms = meaningful(split_terms(creative.mood))
    mood = creative.mood if mood_terms else FALLBACK_MOOD
    return CreativeContext(
        brand=or_default(creative.brand_name, FALLBACK_BRAND),
        product=or_default(creative.product, FALLBACK_PRODUCT),
        audience=or_default(creative.audience, FALLBACK_AUDIENCE),
        mood=mood,
        mood_terms=tuple(mood_terms or split_terms(FALLBACK_MOOD)),
        keywords=tuple(dedupe(meaningful(creative.keywords))),
        palette=tuple(meaningful(creative.palette)),
        differentiators=tuple(dedupe(meaningful(creative.differentiators))),
    )


def with_article(phrase: str) -> str:
    """관사가 없으면 "the"를 붙입니다."""
    if phrase.lower().startswith(_ARTICLES):
        return phrase
    return f"the {phrase}"


def differentiator_phrase(differentiators: list[str], limit: int = 0) -> str:
    """차별화 요소를 영어 나열로 만듭니다. 없으면 기본 문구."""
    items = differentiators[:limit] if limit else differentiators
    phrase = human_join([lower_first(strip_sentence(item)) for item in items])
    return phrase or FALLBACK_DIFFERENTIATOR


# ── Narrative ─────────────────────────────────────────────────────────

def derive_narrative(ctx: CreativeContext) -> Narrative:
    differentiators = list(ctx.differentiators)
    voice_keywords = human_join(list(ctx.keywords[:VOICE_KEYWORD_LIMIT])) or FALLBACK_VOICE_KEYWORDS
    return Narrative(
        positioning=(
            f"{upper_first(ctx.brand)} is {with_article(ctx.product)} built for {ctx.audience}, "
            f"defined by {differentiator_phrase(differentiators, limit=2)}."
        ),
        voice=f"{upper_first(ctx.mood_phrase)} voice, expressed through {voice_keywords}.",
        promise=(
            f"Every touchpoint gives {ctx.audience} an experience that feels {ctx.mood_phrase}, "
            f"shaped by {differentiator_phrase(differentiators)}."
        ),
    )


# ── Prompts ───────────────────────────────────────────────────────────

def build_prompt(subject: str, mood_phrase: str, palette: list[str], keywords: list[str],
                 directive: str, parameters: str) -> str:
    """
    프롬프트 한 줄을 조합합니다.

    팔레트/키워드 절은 값이 있을 때만 들어갑니다.
    """
    parts = [subject, f"{mood_phrase} mood"]
    if palette:
        parts.append(f"color palette {', '.join(palette[:PROMPT_PALETTE_LIMIT])}")
    if keywords:
        parts.append(f"featuring {', '.join(keywords[:PROMPT_KEYWORD_LIMIT])}")
    parts.append(directive)
    return f"{', '.join(parts)} {parameters}"


def derive_prompts(ctx: CreativeContext) -> PromptSet:
    """5개 슬롯(hero, background, branding, ux, three_d) 프롬프트."""
    prompts = {
        slot.key: build_prompt(
            subject=slot.subject.format(brand=ctx.brand, product=ctx.product),
            mood_phrase=ctx.mood_phrase,
            palette=list(ctx.palette),
            keywords=list(ctx.keywords),
            directive=slot.directive,
            parameters=slot.parameters,
        )
        for slot in PROMPT_SLOTS
    }
    return PromptSet(**prompts)


# ── Figma system ──────────────────────────────────────────────────────

def derive_layout(ctx: CreativeContext) -> LayoutFramework:
    accent = pick(list(ctx.swatches), 2, DEFAULT_PALETTE[2])
    return LayoutFramework(
        grid=LAYOUT_GRID.format(mood=ctx.mood_first),
        spacing=LAYOUT_SPACING.format(mood=ctx.mood_first),
        breakpoints=list(BREAKPOINTS),
        notes=[
            f"Anchor hero compositions on {ctx.lead_keyword} and keep the focal point above the fold",
            f"Reserve {accent} for interactive states, links and focus rings",
            f"Lock {ctx.brand} logo lockups to the 8pt grid at every breakpoint",
        ],
    )


def derive_components(ctx: CreativeContext) -> list[ComponentSpec]:
    """컴포넌트 카탈로그 순서대로. 차별화 요소/키워드는 인덱스로 순환합니다."""
    components = []
    for i, template in enumerate(COMPONENT_CATALOG):
        values = {
            "brand": ctx.brand,
            "product": ctx.product,
            "audience": ctx.audience,
            "differentiator": strip_sentence(pick(list(ctx.differentiators), i, FALLBACK_DIFFERENTIATOR)),
            "keyword": pick(list(ctx.keywords), i, FALLBACK_KEYWORD),
        }
        components.append(ComponentSpec(
            name=template.name,
            usage=upper_first(template.usage.format(**values)),
            states=list(template.states),
            dataset=[upper_first(row.format(**values)) for row in template.dataset],
        ))
    return components


def derive_flows(ctx: CreativeContext) -> list[ExperienceFlow]:
    flows = []
    for i, template in enumerate(FLOW_CATALOG):
        values = {
            "brand": ctx.brand,
            "product": ctx.product,
            "audience": ctx.audience,
            "differentiator": lower_first(strip_sentence(
                pick(list(ctx.differentiators), i, FALLBACK_DIFFERENTIATOR)
            )),
            "keyword": pick(list(ctx.keywords), i, FALLBACK_KEYWORD),
        }
        flows.append(ExperienceFlow(
            name=template.name,
            touchpoints=[upper_first(tp.format(**values)) for tp in template.touchpoints],
            success=template.success,
        ))
    return flows


def derive_figma_system(ctx: CreativeContext) -> FigmaSystem:
    return FigmaSystem(
        layout=derive_layout(ctx),
        components=derive_components(ctx),
        flows=derive_flows(ctx),
    )


# ── Content ───────────────────────────────────────────────────────────

def derive_value_props(differentiators: list[str]) -> list[str]:
    """정확히 3개. 차별화 요소가 부족하면 기본 가치 제안으로 채웁니다."""
    props = []
    for i in range(VALUE_PROP_COUNT):
        head = differentiators[i] if i < len(differentiators) else DEFAULT_VALUE_PROPS[i]
        props.append(f"{strip_sentence(head)}, {VALUE_PROP_CLAUSES[i]}.")
    return props


def derive_content(ctx: CreativeContext) -> CopyDeck:
    return CopyDeck(
        hero=f"{upper_first(ctx.brand)}: {ctx.product}, designed to feel {ctx.mood_phrase}.",
        subheading=sentence(
            f"Built for {ctx.audience}, {ctx.brand} turns {ctx.lead_differentiator} "
            f"into an everyday advantage"
        ),
        ctas=[
            f"Start with {ctx.brand}",
            "Book a guided walkthrough",
            f"Explore {ctx.lead_differentiator}",
        ],
        value_props=derive_value_props(list(ctx.differentiators)),
        onboarding=(
            f"Welcome {ctx.audience} into {ctx.brand} with a guided first session: "
            f"shape the workspace around {ctx.lead_keyword}, experience {ctx.lead_differentiator} "
            f"within minutes, and leave with a first win that feels {ctx.mood_phrase}."
        ),
    )


# ── Style guide ───────────────────────────────────────────────────────

def derive_palette(tokens: list[str]) -> list[PaletteToken]:
    """
    팔레트 토큰을 1:1로 매핑합니다.

    이름은 역할 순서(Primary, Background, Accent, Surface, Text)를 따르고,
    한 바퀴를 넘으면 숫자 접미사를 붙입니다 (Primary 2, ...).
    """
    role_count = len(PALETTE_ROLES)
    palette = []
    for i, token in enumerate(tokens):
        name = PALETTE_ROLES[i % role_count]
        if i >= role_count:
            name = f"{name} {i // role_count + 1}"
        palette.append(PaletteToken(name=name, value=token, usage=PALETTE_USAGE[i % role_count]))
    return palette


def select_font_pairing(mood: str) -> FontPairing:
    for pairing in FONT_PAIRINGS:
        if contains_term(mood, pairing.terms):
            return pairing
    return DEFAULT_FONT_PAIRING


def derive_typography(mood: str) -> list[TypographyToken]:
    pairing = select_font_pairing(mood)
    return [
        TypographyToken(
            role=role.role,
            font=pairing.display if role.uses_display else pairing.text,
            specs=role.specs,
        )
        for role in TYPE_SCALE
    ]


def derive_style_guide(ctx: CreativeContext) -> StyleGuide:
    keywords = list(ctx.keywords)
    values = {
        "brand": ctx.brand,
        "mood": ctx.mood_first,
        "mood_first": ctx.mood_first,
        "mood_title": upper_first(ctx.mood_first),
        "keyword": pick(keywords, 0, FALLBACK_KEYWORD),
        "secondary_keyword": pick(keywords, 1, FALLBACK_KEYWORD),
        "differentiator": ctx.lead_differentiator,
    }
    return StyleGuide(
        palette=derive_palette(list(ctx.swatches)),
        typography=derive_typography(ctx.mood),
        imagery=[template.format(**values) for template in IMAGERY_TEMPLATES],
        motion=[template.format(**values) for template in MOTION_TEMPLATES],
        iconography=[template.format(**values) for template in ICONOGRAPHY_TEMPLATES],
    )


# ── Recommendations ───────────────────────────────────────────────────

def derive_recommendations(ctx: CreativeContext) -> list[str]:
    """조건부 권고를 먼저, 나머지는 기본 권고로 채워 정확히 4개를 반환합니다."""
    recommendations: list[str] = []
    keyword_count = len(ctx.keywords)
    palette_count = len(ctx.palette)
    differentiator_count = len(ctx.differentiators)

    if not differentiator_count:
        recommendations.append(
            "Name two or three differentiators so value props and prompts carry a distinct point of view."
        )
    if keyword_count < MIN_KEYWORDS:
        recommendations.append(
            f"Add at least {MIN_KEYWORDS} visual keywords so prompt variations stay on-brand."
        )
    if keyword_count > MAX_KEYWORDS:
        recommendations.append(
            f"Narrow the {keyword_count} visual keywords to a core set of {MAX_KEYWORDS} so prompts stay focused."
        )
    if not palette_count:
        recommendations.append(
            "Commit to a brand palette before production, the default neutral palette is only a starting point."
        )
    elif palette_count < MIN_PALETTE:
        recommendations.append(
            f"Extend the palette to at least {MIN_PALETTE} tokens so accent and surface roles stay distinct."
        )
    if differentiator_count > MAX_DIFFERENTIATORS:
        recommendations.append(
            f"Prioritize the top three of {differentiator_count} differentiators so the story stays memorable."
        )

    for default in DEFAULT_RECOMMENDATIONS:
        if len(recommendations) >= RECOMMENDATION_COUNT:
            break
        recommendations.append(default)
    return recommendations[:RECOMMENDATION_COUNT]
