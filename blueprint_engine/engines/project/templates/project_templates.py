"""Static template tables for project blueprint generation.

Each table is an ordered tuple. Position is significant: workstreams, phases
and RACI activities are emitted in table order.
"""

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# 입력 필드 기본 문구
# ---------------------------------------------------------------------------

FALLBACK_NAME = "the initiative"
FALLBACK_VISION = "connect strategy, delivery and operations in one accountable program"
FALLBACK_INDUSTRY = "cross-industry"
FALLBACK_TIMEFRAME = "the agreed delivery window"
FALLBACK_BUDGET = "the approved budget envelope"
FALLBACK_CONSTRAINT = "delivery constraints"
FALLBACK_SPONSOR = "Executive sponsor"
FALLBACK_INFORMED = "Steering committee"


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

VALUE_STREAM_CLAUSES = (
    "anchored to an executive-sponsored outcome",
    "powered by shared data and reusable playbooks",
    "proven through transparent KPI tracking",
)


# ---------------------------------------------------------------------------
# Architecture
# ---------------------------------------------------------------------------

DEFAULT_OBJECTIVES = (
    "Clarify the target operating model",
    "Deliver a first release that proves measurable value",
    "Embed adoption and continuous improvement rituals",
)

DEFAULT_KPIS = (
    "Time to first value",
    "Adoption rate across target teams",
    "Stakeholder satisfaction score",
)

DELIVERABLE_TEMPLATES = (
    "{industry} operating blueprint and governance model",
    "Target-state experience architecture",
    "Integrated {industry} data and platform backlog",
    "Change enablement and adoption kit",
    "Executive KPI command dashboard",
)


@dataclass(frozen=True)
class WorkstreamTemplate:
    """WBS 워크스트림 정의."""
    title: str
    default_owner: str
    keywords: tuple[str, ...]
    work_items: tuple[str, ...]


WORKSTREAMS = (
    WorkstreamTemplate(
        title="Strategy & Governance",
        default_owner="Program Director",
        keywords=("strateg", "program", "director", "pmo", "pm", "sponsor", "governance", "portfolio"),
        work_items=(
            "Stand up the steering cadence and decision log for {name}",
            "Translate '{objective}' into a measurable benefits case",
            "Maintain the integrated plan, RAID log and budget burn",
        ),
    ),
    WorkstreamTemplate(
        title="Experience & Design",
        default_owner="Experience Design Lead",
        keywords=("design", "ux", "ui", "product", "research", "experience", "content", "brand"),
        work_items=(
            "Map current and target journeys for priority {industry} users",
            "Prototype and test the core workflows with real users",
            "Publish the design system and interaction standards",
        ),
    ),
    WorkstreamTemplate(
        title="Engineering & Data",
        default_owner="Lead Engineer",
        keywords=("engineer", "develop", "architect", "data", "tech", "platform", "devops", "qa", "security", "analyst"),
        work_items=(
            "Define the solution architecture and integration contracts",
            "Build, test and release increments behind feature flags",
            "Instrument telemetry for KPI and adoption reporting",
        ),
    ),
    WorkstreamTemplate(
        title="Change & Adoption",
        default_owner="Change Lead",
        keywords=("change", "enablement", "training", "comms", "communication", "adoption", "marketing", "ops", "operation", "people", "hr"),
        work_items=(
            "Run stakeholder impact assessments and readiness checks",
            "Deliver enablement paths and champions network for {name}",
            "Track adoption signals and close feedback loops",
        ),
    ),
)

DEFAULT_TEAM = (
    "Program Director",
    "Experience Design Lead",
    "Lead Engineer",
    "Change Lead",
)

MILESTONE_COUNT = 4

MILESTONE_GATES = (
    "Mobilization complete",
    "Design authority sign-off",
    "Pilot release in market",
    "Scale-up and value realization review",
)

# 기간 단위 (timeframe 문자열에서 추출)
TIMEFRAME_UNITS = {
    "day": "Day",
    "week": "Week",
    "sprint": "Sprint",
    "month": "Month",
    "quarter": "Quarter",
    "year": "Year",
}

HIGH_RISK_TERMS = (
    "legacy", "compliance", "regulat", "deadline", "compressed",
    "security", "privacy", "critical", "strict", "tight",
)

LOW_RISK_TERMS = ("minor", "optional", "nice to have", "cosmetic", "low impact")


@dataclass(frozen=True)
class MitigationRule:
    """제약 키워드에 대응하는 완화 문구."""
    terms: tuple[str, ...]
    mitigation: str


MITIGATION_RULES = (
    MitigationRule(
        terms=("legacy", "integration", "mainframe", "technical debt"),
        mitigation="Stand up an integration facade and retire legacy interfaces incrementally",
    ),
    MitigationRule(
        terms=("compliance", "regulat", "audit", "privacy", "legal"),
        mitigation="Embed compliance reviewers in the design authority and pre-clear controls",
    ),
    MitigationRule(
        terms=("timeline", "deadline", "compressed", "go-live", "schedule"),
        mitigation="Protect the critical path with weekly burn-down reviews and scope triage",
    ),
    MitigationRule(
        terms=("budget", "cost", "funding", "spend"),
        mitigation="Stage funding against milestone evidence and track burn weekly",
    ),
    MitigationRule(
        terms=("talent", "capacity", "resource", "staff", "skill", "hiring"),
        mitigation="Secure named capacity early and pair external specialists with internal owners",
    ),
    MitigationRule(
        terms=("adoption", "resistance", "culture", "change"),
        mitigation="Activate a champions network and measure readiness before each release",
    ),
)

GENERIC_MITIGATIONS = (
    "Assign a named owner and review the exposure at every steering meeting",
    "Define early-warning indicators and a pre-agreed escalation path",
    "Run a time-boxed spike to retire the uncertainty before committing scope",
)

DEFAULT_RISKS = (
    "Stakeholder alignment drifts as priorities shift",
    "Scope expands across workstreams without trade-offs",
    "Adoption lags after launch",
)

INTEGRATION_DEPENDENCIES = (
    "Identity and access management integration",
    "Enterprise data platform availability",
    "Security and compliance review calendar",
)


# ---------------------------------------------------------------------------
# Execution pathway
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PhaseTemplate:
    """실행 경로 단계 정의 (순서 고정)."""
    name: str
    focus: str
    steps: tuple[str, ...]


PHASES = (
    PhaseTemplate(
        name="Discovery & Alignment",
        focus="Align sponsors on the outcomes for {name} and baseline {kpi}.",
        steps=(
            "Run stakeholder interviews and capture decision rights",
            "Baseline current-state {industry} processes and data",
            "Pressure-test the plan against {constraint}",
        ),
    ),
    PhaseTemplate(
        name="Design & Architecture",
        focus="Shape the target-state experience that delivers '{objective}'.",
        steps=(
            "Co-design target journeys with priority users",
            "Define platform architecture and integration contracts",
            "Approve the design authority backlog for build",
        ),
    ),
    PhaseTemplate(
        name="Build & Integrate",
        focus="Deliver iterative releases across all workstreams within {budget}.",
        steps=(
            "Run two-week delivery sprints with an open demo cadence",
            "Integrate data, identity and workflow services",
            "Contain {secondary_constraint} through weekly risk reviews",
        ),
    ),
    PhaseTemplate(
        name="Launch & Scale",
        focus="Launch {name} and prove value against {kpi}.",
        steps=(
            "Execute the pilot launch with hypercare support",
            "Publish the value scorecard for {kpi}",
            "Scale adoption across regions and functions",
        ),
    ),
)


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

CHARTER_SECTIONS = (
    "Vision",
    "Objectives",
    "Success measures",
    "Sponsors & stakeholders",
    "Constraints & assumptions",
)

SOW_SECTIONS = (
    "Scope of work",
    "Deliverables",
    "Workstreams",
    "Phases",
    "Commercials",
    "Acceptance",
)


@dataclass(frozen=True)
class RaciActivity:
    """RACI 매트릭스 활동 행. workstream은 WORKSTREAMS 인덱스."""
    activity: str
    workstream: int


RACI_ACTIVITIES = (
    RaciActivity(activity="Program governance & steering", workstream=0),
    RaciActivity(activity="Experience and solution design", workstream=1),
    RaciActivity(activity="Platform build & integration", workstream=2),
    RaciActivity(activity="Change management & adoption", workstream=3),
    RaciActivity(activity="Benefits tracking & reporting", workstream=0),
)


@dataclass(frozen=True)
class HorizonTemplate:
    """로드맵 구간 정의."""
    horizon: str
    default_outcome: str
    enabler: str


ROADMAP_HORIZONS = (
    HorizonTemplate(
        horizon="Now · 0-90 days",
        default_outcome="Mobilize the team and land the first proof of value",
        enabler="Steering cadence and integrated delivery plan",
    ),
    HorizonTemplate(
        horizon="Next · 3-6 months",
        default_outcome="Extend the solution to adjacent teams and workflows",
        enabler="Reusable platform services and design system",
    ),
    HorizonTemplate(
        horizon="Later · 6-12 months",
        default_outcome="Institutionalize continuous improvement and scale value",
        enabler="Benefits realization office and product operating model",
    ),
)


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------

RECOMMENDATION_COUNT = 5

COMPLIANCE_TERMS = (
    "compliance", "regulat", "audit", "grant", "public",
    "federal", "government", "capex",
)

LEGACY_TERMS = ("legacy", "mainframe", "technical debt")

DEFAULT_RECOMMENDATIONS = (
    "Publish a one-page decision charter so every workstream knows who decides what.",
    "Tie each release to a KPI movement and review it at the steering forum.",
    "Keep a rolling two-sprint lookahead to surface dependencies before they block delivery.",
    "Fund change enablement from day one rather than after launch.",
    "Run a formal lessons-learned retro at every phase gate.",
)
