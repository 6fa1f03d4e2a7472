"""Static template tables for creative blueprint generation."""

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# 입력 필드 기본 문구
# ---------------------------------------------------------------------------

FALLBACK_BRAND = "the brand"
FALLBACK_PRODUCT = "a signature digital experience"
FALLBACK_AUDIENCE = "discerning modern customers"
FALLBACK_MOOD = "confident, refined, contemporary"
FALLBACK_DIFFERENTIATOR = "uncompromising attention to craft"
FALLBACK_KEYWORD = "considered negative space"
FALLBACK_VOICE_KEYWORDS = "clarity and quiet precision"

DEFAULT_PALETTE = ("#0B0F19", "#F5F7FA", "#3B82F6", "#1F2937", "#111827")

# 키워드/팔레트가 프롬프트에 들어가는 최대 개수
PROMPT_KEYWORD_LIMIT = 4
PROMPT_PALETTE_LIMIT = 3
VOICE_KEYWORD_LIMIT = 3


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PromptSlot:
    """이미지 생성 프롬프트 슬롯 (순서 및 키 고정)."""
    key: str
    label: str
    subject: str
    directive: str
    parameters: str


PROMPT_SLOTS = (
    PromptSlot(
        key="hero",
        label="Hero Visual",
        subject="Cinematic hero visual for {brand}, {product}",
        directive="editorial composition with a clear focal point and room for headline copy",
        parameters="--ar 16:9 --style raw --v 6",
    ),
    PromptSlot(
        key="background",
        label="Background System",
        subject="Seamless background system for {brand}",
        directive="subtle gradients and layered textures that never compete with foreground content",
        parameters="--ar 21:9 --tile --v 6",
    ),
    PromptSlot(
        key="branding",
        label="Brand Signature",
        subject="Brand signature mark and identity scene for {brand}",
        directive="geometric precision, balanced negative space, premium material finish",
        parameters="--ar 1:1 --style raw --v 6",
    ),
    PromptSlot(
        key="ux",
        label="UI / UX Narrative",
        subject="High-fidelity product interface for {product} by {brand}",
        directive="clean dashboard hierarchy, legible typography, realistic device framing",
        parameters="--ar 4:3 --v 6",
    ),
    PromptSlot(
        key="three_d",
        label="3D Concept",
        subject="3D hero object that embodies {brand}",
        directive="octane render, soft studio lighting, sculpted forms with tactile materials",
        parameters="--ar 3:2 --v 6",
    ),
)


# ---------------------------------------------------------------------------
# Figma system
# ---------------------------------------------------------------------------

BREAKPOINTS = (
    "Mobile · 375px · 4-column grid",
    "Tablet · 768px · 8-column grid",
    "Desktop · 1280px · 12-column grid",
    "Wide · 1600px · 12-column grid with fixed max width",
)

LAYOUT_GRID = "12-column fluid grid, 1440px max width, 24px gutters tuned for a {mood} composition"
LAYOUT_SPACING = "8pt spacing scale (4, 8, 16, 24, 40, 64) with generous negative space to hold a {mood} tone"


@dataclass(frozen=True)
class ComponentTemplate:
    """Figma 컴포넌트 카탈로그 항목."""
    name: str
    usage: str
    states: tuple[str, ...]
    dataset: tuple[str, ...]


COMPONENT_CATALOG = (
    ComponentTemplate(
        name="Navigation",
        usage="Persistent top navigation that keeps {product} one click away for {audience}",
        states=("Default", "Scrolled", "Menu open", "Focus"),
        dataset=("Brand mark: {brand}", "Links: Product, Solutions, Pricing, Company", "Primary action: Start with {brand}"),
    ),
    ComponentTemplate(
        name="Hero",
        usage="Opening statement that frames {product} and the core promise",
        states=("Default", "Video playing", "Reduced motion"),
        dataset=("Headline: {brand}", "Supporting line: {differentiator}", "Visual: {keyword}"),
    ),
    ComponentTemplate(
        name="Feature Card",
        usage="Modular card that explains one capability of {product}",
        states=("Default", "Hover", "Selected", "Disabled"),
        dataset=("Title: {differentiator}", "Body: proof point for {audience}", "Icon: {keyword}"),
    ),
    ComponentTemplate(
        name="Pricing Table",
        usage="Plan comparison that makes the upgrade path for {audience} obvious",
        states=("Default", "Highlighted plan", "Annual toggle", "Loading"),
        dataset=("Plans: Starter, Growth, Enterprise", "Highlight: {differentiator}", "CTA: Talk to {brand}"),
    ),
    ComponentTemplate(
        name="Footer",
        usage="Closing block that reinforces trust and secondary navigation",
        states=("Default", "Newsletter success", "Newsletter error"),
        dataset=("Sitemap columns", "Newsletter signup", "Legal and social links for {brand}"),
    ),
)


@dataclass(frozen=True)
class FlowTemplate:
    """경험 흐름 정의."""
    name: str
    touchpoints: tuple[str, ...]
    success: str


FLOW_CATALOG = (
    FlowTemplate(
        name="Onboarding",
        touchpoints=(
            "Landing hero introduces {brand} to {audience}",
            "Value moment spotlights {differentiator}",
            "Guided setup personalized around {keyword}",
        ),
        success="Activated account within the first session",
    ),
    FlowTemplate(
        name="Core task",
        touchpoints=(
            "Dashboard surfaces the next best action in {product}",
            "Task workspace applies {differentiator}",
            "Completion state celebrates the outcome with {keyword} visuals",
        ),
        success="Core task completed without support in under five minutes",
    ),
    FlowTemplate(
        name="Upgrade",
        touchpoints=(
            "Usage insight shows the value already delivered",
            "Plan comparison highlights {differentiator}",
            "Frictionless checkout confirms the upgrade with {brand}",
        ),
        success="Upgrade conversion with no drop-off at checkout",
    ),
)


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------

VALUE_PROP_COUNT = 3

VALUE_PROP_CLAUSES = (
    "so every decision starts from a clear story",
    "so teams move faster with less friction",
    "so the experience feels tailored from day one",
)

DEFAULT_VALUE_PROPS = (
    "Crafted experience",
    "Effortless workflow",
    "Trusted outcomes",
)


# ---------------------------------------------------------------------------
# Style guide
# ---------------------------------------------------------------------------

PALETTE_ROLES = ("Primary", "Background", "Accent", "Surface", "Text")

PALETTE_USAGE = (
    "Brand marks, primary CTAs and key data highlights",
    "Page canvas and large layout regions",
    "Interactive highlights, links and focus rings",
    "Cards, panels and elevated containers",
    "Body copy, icons and high-contrast labels",
)


@dataclass(frozen=True)
class FontPairing:
    """무드 키워드에 대응하는 서체 조합."""
    terms: tuple[str, ...]
    display: str
    text: str


FONT_PAIRINGS = (
    FontPairing(terms=("minimal", "modern", "clean", "tech", "futur"), display="Neue Montreal", text="Inter"),
    FontPairing(terms=("luxury", "elegant", "premium", "editorial", "classic"), display="Canela", text="Söhne"),
    FontPairing(terms=("playful", "bold", "vibrant", "energetic", "fun"), display="Clash Display", text="Satoshi"),
    FontPairing(terms=("warm", "organic", "natural", "calm", "human"), display="Fraunces", text="DM Sans"),
)

DEFAULT_FONT_PAIRING = FontPairing(terms=(), display="Sora", text="Inter")


@dataclass(frozen=True)
class TypeRole:
    """타이포그래피 스케일 역할."""
    role: str
    uses_display: bool
    specs: str


TYPE_SCALE = (
    TypeRole(role="Display", uses_display=True, specs="64/72, -2% tracking, semibold"),
    TypeRole(role="Heading", uses_display=True, specs="32/40, -1% tracking, medium"),
    TypeRole(role="Body", uses_display=False, specs="16/26, 0% tracking, regular"),
    TypeRole(role="Caption", uses_display=False, specs="12/16, +4% tracking, medium, uppercase"),
)

IMAGERY_TEMPLATES = (
    "{mood_title} photography with {keyword} as the visual anchor",
    "Art direction favors {secondary_keyword} and honest, unstaged moments",
    "Every frame keeps clear space for {brand} typography",
)

MOTION_TEMPLATES = (
    "Easing: cubic-bezier(0.22, 1, 0.36, 1) for a {mood} feel",
    "Durations: 150ms micro-interactions, 300ms transitions, 600ms hero reveals",
    "Scroll-linked reveals echo {keyword} without blocking content",
)

ICONOGRAPHY_TEMPLATES = (
    "1.5px stroke line icons on a 24px grid with rounded joins",
    "Filled variants reserved for active and selected states",
    "Custom glyphs for {differentiator} drawn in the {mood_first} style",
)


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------

RECOMMENDATION_COUNT = 4
MIN_KEYWORDS = 3
MAX_KEYWORDS = 6
MIN_PALETTE = 3
MAX_DIFFERENTIATORS = 5

DEFAULT_RECOMMENDATIONS = (
    "Validate the hero prompt set with three rounds of variations before locking art direction.",
    "Build the Figma library from tokens first so palette and type changes cascade automatically.",
    "Test the copy deck with five target users and keep the phrases they repeat back.",
    "Document motion principles alongside components so engineering ships them consistently.",
)
