"""Project blueprint derivation rules: deterministic, no randomness.

Each function consumes only the slice of input it needs plus the static
tables in ``templates.project_templates`` and returns one substructure of the
blueprint. ``ProjectBlueprintGenerator`` assembles the results.
"""

import math
import re
from dataclasses import dataclass
from typing import Optional

from blueprint_engine.models.common import DocumentSection
from blueprint_engine.utils.text import (
    contains_term,
    dedupe,
    human_join,
    lower_first,
    matches_keyword,
    meaningful,
    or_default,
    pick,
    sentence,
    strip_sentence,
    upper_first,
)

from .models import (
    ExecutionPhase,
    ProgramArchitecture,
    ProjectDocuments,
    ProjectInput,
    ProjectSummary,
    RaciEntry,
    Risk,
    RoadmapEntry,
    TimelineEntry,
    Workstream,
)
from .templates.project_templates import (
    CHARTER_SECTIONS,
    COMPLIANCE_TERMS,
    DEFAULT_KPIS,
    DEFAULT_OBJECTIVES,
    DEFAULT_RECOMMENDATIONS,
    DEFAULT_RISKS,
    DEFAULT_TEAM,
    DELIVERABLE_TEMPLATES,
    FALLBACK_BUDGET,
    FALLBACK_CONSTRAINT,
    FALLBACK_INDUSTRY,
    FALLBACK_INFORMED,
    FALLBACK_NAME,
    FALLBACK_SPONSOR,
    FALLBACK_TIMEFRAME,
    FALLBACK_VISION,
    GENERIC_MITIGATIONS,
    HIGH_RISK_TERMS,
    INTEGRATION_DEPENDENCIES,
    LEGACY_TERMS,
    LOW_RISK_TERMS,
    MILESTONE_COUNT,
    MILESTONE_GATES,
    MITIGATION_RULES,
    PHASES,
    RACI_ACTIVITIES,
    RECOMMENDATION_COUNT,
    ROADMAP_HORIZONS,
    SOW_SECTIONS,
    TIMEFRAME_UNITS,
    VALUE_STREAM_CLAUSES,
    WORKSTREAMS,
)

_TIMEFRAME_PATTERN = re.compile(
    r"(\d+)\s*-?\s*(day|week|sprint|month|quarter|year)s?\b",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ProjectContext:
    """입력 필드에 기본 문구를 적용한 생성 컨텍스트."""

    name: str
    vision: str
    industry: str
    timeframe: str
    budget: str
    goals: tuple[str, ...]
    objectives: tuple[str, ...]
    kpis: tuple[str, ...]
    stakeholders: tuple[str, ...]
    team: tuple[str, ...]
    constraints: tuple[str, ...]

    @property
    def primary_objective(self) -> str:
        return strip_sentence(self.objectives[0])

    @property
    def primary_kpi(self) -> str:
        return lower_first(strip_sentence(self.kpis[0]))


def build_context(project: ProjectInput) -> ProjectContext:
    """
    ProjectInput에 기본 문구를 적용하여 컨텍스트를 만듭니다.

    구두점만 있는 항목은 빈 항목으로 취급하여 기본 문구가 적용됩니다.
    """
    goals = meaningful(project.goals)
    return ProjectContext(
        name=or_default(project.name, FALLBACK_NAME),
        vision=or_default(project.vision, FALLBACK_VISION),
        industry=or_default(project.industry, FALLBACK_INDUSTRY),
        timeframe=or_default(project.timeframe, FALLBACK_TIMEFRAME),
        budget=or_default(project.budget, FALLBACK_BUDGET),
        goals=tuple(dedupe(goals)),
        objectives=tuple(resolve_objectives(goals)),
        kpis=tuple(resolve_kpis(meaningful(project.kpis))),
        stakeholders=tuple(meaningful(project.stakeholders)),
        team=tuple(meaningful(project.team)),
        constraints=tuple(meaningful(project.constraints)),
    )


def resolve_objectives(goals: list[str]) -> list[str]:
    """목표를 중복 제거하여 반환합니다. 비어 있으면 기본 목표."""
    return dedupe(goals) or list(DEFAULT_OBJECTIVES)


def resolve_kpis(kpis: list[str]) -> list[str]:
    """KPI를 중복 제거하여 반환합니다. 비어 있으면 기본 KPI."""
    return dedupe(kpis) or list(DEFAULT_KPIS)


# ── Summary ───────────────────────────────────────────────────────────

def derive_summary(ctx: ProjectContext) -> ProjectSummary:
    north_star = f"North star for {ctx.name}: {sentence(upper_first(ctx.vision))}"
    positioning = (
        f"Positioned as the {ctx.industry} benchmark for "
        f"{lower_first(ctx.primary_objective)}, delivered within {ctx.timeframe}."
    )
    return ProjectSummary(
        north_star=north_star,
        positioning=positioning,
        value_streams=derive_value_streams(list(ctx.goals), ctx.name, ctx.industry),
    )


def derive_value_streams(goals: list[str], name: str, industry: str) -> list[str]:
    """목표마다 가치 흐름 문구를 붙입니다. 목표가 없으면 일반 가치 흐름 하나."""
    if not goals:
        return [f"Establish a measurable value stream for {name} in the {industry} context."]
    return [
        f"{strip_sentence(goal)}, {VALUE_STREAM_CLAUSES[i % len(VALUE_STREAM_CLAUSES)]}."
        for i, goal in enumerate(goals)
    ]


# ── Architecture ──────────────────────────────────────────────────────

def derive_scope(vision: str, timeframe: str, budget: str) -> str:
    return f"{sentence(upper_first(vision))} Delivery spans {timeframe} within {budget}."


def derive_deliverables(industry: str) -> list[str]:
    return [upper_first(template.format(industry=industry)) for template in DELIVERABLE_TEMPLATES]


def assign_workstream(member: str, position: int) -> int:
    """
    팀 구성원을 워크스트림에 배정합니다.

    규칙:
    1. 워크스트림 테이블 순서대로, 키워드가 구성원 단어의 접두어이면 해당 워크스트림
    2. 일치하는 키워드가 없으면 position % 워크스트림 수
    """
    for index, workstream in enumerate(WORKSTREAMS):
        if matches_keyword(member, workstream.keywords):
            return index
    return position % len(WORKSTREAMS)


def derive_workstreams(team: list[str], name: str, industry: str, objective: str) -> list[Workstream]:
    """팀을 4개 워크스트림에 배정하고 담당자와 작업 항목을 만듭니다."""
    members = team or list(DEFAULT_TEAM)
    buckets: list[list[str]] = [[] for _ in WORKSTREAMS]
    for position, member in enumerate(members):
        buckets[assign_workstream(member, position)].append(member)

    workstreams = []
    for template, bucket in zip(WORKSTREAMS, buckets):
        work_items = [
            item.format(name=name, industry=industry, objective=objective)
            for item in template.work_items
        ]
        if bucket:
            work_items.append(f"Staff the workstream with {human_join(bucket)}")
        workstreams.append(Workstream(
            title=template.title,
            owner=bucket[0] if bucket else template.default_owner,
            work_items=work_items,
        ))
    return workstreams


def parse_timeframe(timeframe: str) -> Optional[tuple[int, str]]:
    """
    기간 문자열에서 (숫자, 단위 라벨)을 추출합니다.

    예시: "16-week sprint program" -> (16, "Week")
    숫자가 없거나 0이면 None.
    """
    match = _TIMEFRAME_PATTERN.search(timeframe)
    if not match:
        return None
    count = int(match.group(1))
    if count <= 0:
        return None
    return count, TIMEFRAME_UNITS[match.group(2).lower()]


def checkpoint_units(count: int) -> list[int]:
    """기간을 MILESTONE_COUNT 등분한 체크포인트 위치 (올림)."""
    return [max(1, math.ceil(count * (i + 1) / MILESTONE_COUNT)) for i in range(MILESTONE_COUNT)]


def timeframe_checkpoints(timeframe: str) -> Optional[tuple[str, list[int]]]:
    """
    (단위 라벨, 체크포인트 위치)를 반환합니다.

    기간이 MILESTONE_COUNT 단위보다 짧으면 구간이 겹치므로 None (Stage 라벨 사용).
    """
    parsed = parse_timeframe(timeframe)
    if parsed is None or parsed[0] < MILESTONE_COUNT:
        return None
    return parsed[1], checkpoint_units(parsed[0])


def derive_milestones(timeframe: str, objectives: list[str]) -> list[str]:
    """기간 기반 체크포인트 4개. 각 마일스톤은 목표 하나를 검증합니다."""
    checkpoints = timeframe_checkpoints(timeframe)

    milestones = []
    for i, gate in enumerate(MILESTONE_GATES):
        if checkpoints:
            label = f"{checkpoints[0]} {checkpoints[1][i]}"
        else:
            label = f"Checkpoint {i + 1} of {MILESTONE_COUNT}"
        objective = strip_sentence(pick(objectives, i, DEFAULT_OBJECTIVES[0]))
        milestones.append(f"{label} · {gate}: validates '{objective}'")
    return milestones


def classify_probability(constraint: str) -> str:
    if contains_term(constraint, HIGH_RISK_TERMS):
        return "High"
    if contains_term(constraint, LOW_RISK_TERMS):
        return "Low"
    return "Medium"


def match_mitigation(constraint: str, index: int) -> str:
    for rule in MITIGATION_RULES:
        if contains_term(constraint, rule.terms):
            return rule.mitigation
    return GENERIC_MITIGATIONS[index % len(GENERIC_MITIGATIONS)]


def derive_risks(constraints: list[str]) -> list[Risk]:
    titles = constraints or list(DEFAULT_RISKS)
    return [
        Risk(
            title=title,
            probability=classify_probability(title),
            mitigation=match_mitigation(title, i),
        )
        for i, title in enumerate(titles)
    ]


def derive_dependencies(stakeholders: list[str]) -> list[str]:
    sponsors = [f"Executive sponsorship from {stakeholder}" for stakeholder in stakeholders]
    if not sponsors:
        sponsors = ["Nomination of an accountable executive sponsor"]
    return sponsors + list(INTEGRATION_DEPENDENCIES)


def derive_architecture(ctx: ProjectContext) -> ProgramArchitecture:
    objectives = list(ctx.objectives)
    return ProgramArchitecture(
        scope=derive_scope(ctx.vision, ctx.timeframe, ctx.budget),
        objectives=objectives,
        kpis=list(ctx.kpis),
        deliverables=derive_deliverables(ctx.industry),
        wbs=derive_workstreams(list(ctx.team), ctx.name, ctx.industry, ctx.primary_objective),
        milestones=derive_milestones(ctx.timeframe, objectives),
        risks=derive_risks(list(ctx.constraints)),
        dependencies=derive_dependencies(list(ctx.stakeholders)),
    )


# ── Execution pathway ─────────────────────────────────────────────────

def derive_execution_path(ctx: ProjectContext) -> list[ExecutionPhase]:
    """고정된 4단계 실행 경로 (Discovery -> Design -> Build -> Launch)."""
    constraints = list(ctx.constraints)
    values = {
        "name": ctx.name,
        "industry": ctx.industry,
        "budget": ctx.budget,
        "objective": ctx.primary_objective,
        "kpi": ctx.primary_kpi,
        "constraint": lower_first(pick(constraints, 0, FALLBACK_CONSTRAINT)),
        "secondary_constraint": lower_first(pick(constraints, 1, FALLBACK_CONSTRAINT)),
    }
    return [
        ExecutionPhase(
            name=phase.name,
            focus=upper_first(phase.focus.format(**values)),
            steps=[upper_first(step.format(**values)) for step in phase.steps],
        )
        for phase in PHASES
    ]


# ── Documents ─────────────────────────────────────────────────────────

def derive_charter(ctx: ProjectContext) -> list[DocumentSection]:
    stakeholders = list(ctx.stakeholders) or [f"{FALLBACK_SPONSOR} (to be nominated)"]
    constraints = list(ctx.constraints) + [
        f"Budget guardrail: {ctx.budget}",
        f"Timeframe: {ctx.timeframe}",
    ]
    items = (
        [sentence(upper_first(ctx.vision))],
        list(ctx.objectives),
        list(ctx.kpis),
        stakeholders,
        constraints,
    )
    return [DocumentSection(title=title, items=section) for title, section in zip(CHARTER_SECTIONS, items)]


def derive_sow(
    ctx: ProjectContext,
    architecture: ProgramArchitecture,
    execution_path: list[ExecutionPhase],
) -> list[DocumentSection]:
    sponsor = ctx.stakeholders[0] if ctx.stakeholders else FALLBACK_SPONSOR
    kpi_focus = human_join([lower_first(kpi) for kpi in ctx.kpis[:3]])
    items = (
        [architecture.scope],
        list(architecture.deliverables),
        [f"{workstream.title}: owned by {workstream.owner}" for workstream in architecture.wbs],
        [f"{phase.name}: {phase.focus}" for phase in execution_path],
        [
            f"Budget guardrail: {ctx.budget}",
            f"Delivery window: {ctx.timeframe}",
            "Change requests approved through the steering forum",
        ],
        [
            f"Each deliverable is signed off by {sponsor}",
            f"Success is measured against {kpi_focus}",
            "Every phase exit requires a documented go/no-go decision",
        ],
    )
    return [DocumentSection(title=title, items=section) for title, section in zip(SOW_SECTIONS, items)]


def derive_raci(wbs: list[Workstream], stakeholders: list[str]) -> list[RaciEntry]:
    """
    RACI 매트릭스를 결정적으로 만듭니다.

    - Responsible: 활동에 연결된 워크스트림 담당자
    - Accountable: stakeholders[i % n]
    - Consulted: 다음 워크스트림 담당자
    - Informed: 나머지 이해관계자 (없으면 Steering committee)
    """
    sponsors = stakeholders or [FALLBACK_SPONSOR]
    entries = []
    for i, activity in enumerate(RACI_ACTIVITIES):
        accountable = sponsors[i % len(sponsors)]
        informed = [sponsor for sponsor in sponsors if sponsor != accountable]
        entries.append(RaciEntry(
            activity=activity.activity,
            responsible=wbs[activity.workstream].owner,
            accountable=accountable,
            consulted=wbs[(activity.workstream + 1) % len(wbs)].owner,
            informed=", ".join(informed) or FALLBACK_INFORMED,
        ))
    return entries


def derive_timeline(
    execution_path: list[ExecutionPhase],
    milestones: list[str],
    timeframe: str,
) -> list[TimelineEntry]:
    """
    실행 단계마다 기간 구간 하나.

    숫자 기간이 4 단위 이상이면 겹치지 않는 연속 구간, 아니면 Stage 라벨.
    """
    checkpoints = timeframe_checkpoints(timeframe)

    entries = []
    start = 1
    for i, phase in enumerate(execution_path):
        if checkpoints:
            unit, bounds = checkpoints
            end = bounds[i % len(bounds)]
            period = f"{unit}s {start}-{end}" if end > start else f"{unit} {end}"
            start = end + 1
        else:
            period = f"Stage {i + 1}"
        entries.append(TimelineEntry(
            period=period,
            focus=phase.focus,
            checkpoints=[milestones[i % len(milestones)], f"{phase.name} exit review"],
        ))
    return entries


def derive_roadmap(objectives: list[str], kpis: list[str]) -> list[RoadmapEntry]:
    """목표/KPI를 순서대로 Now / Next / Later 구간에 나눕니다."""
    horizon_count = len(ROADMAP_HORIZONS)

    def bucket(items: list[str]) -> list[list[str]]:
        buckets: list[list[str]] = [[] for _ in ROADMAP_HORIZONS]
        for j, item in enumerate(items):
            buckets[min(j * horizon_count // len(items), horizon_count - 1)].append(item)
        return buckets

    outcome_buckets = bucket(objectives)
    kpi_buckets = bucket(kpis)
    return [
        RoadmapEntry(
            horizon=template.horizon,
            outcomes=outcomes or [template.default_outcome],
            enablers=[template.enabler] + [f"Instrument {lower_first(kpi)}" for kpi in horizon_kpis],
        )
        for template, outcomes, horizon_kpis in zip(ROADMAP_HORIZONS, outcome_buckets, kpi_buckets)
    ]


def derive_documents(
    ctx: ProjectContext,
    architecture: ProgramArchitecture,
    execution_path: list[ExecutionPhase],
) -> ProjectDocuments:
    return ProjectDocuments(
        charter=derive_charter(ctx),
        sow=derive_sow(ctx, architecture, execution_path),
        raci=derive_raci(list(architecture.wbs), list(ctx.stakeholders)),
        timeline=derive_timeline(execution_path, list(architecture.milestones), ctx.timeframe),
        roadmap=derive_roadmap(list(ctx.objectives), list(ctx.kpis)),
    )


# ── Recommendations ───────────────────────────────────────────────────

def derive_recommendations(ctx: ProjectContext, raw_kpis: list[str]) -> list[str]:
    """조건부 권고를 먼저, 나머지는 기본 권고로 채워 정확히 5개를 반환합니다."""
    recommendations: list[str] = []
    constraints = list(ctx.constraints)

    if contains_term(ctx.budget, COMPLIANCE_TERMS):
        recommendations.append(
            f"Ring-fence part of {ctx.budget} for compliance, audit and security assurance work."
        )
    if any(contains_term(constraint, COMPLIANCE_TERMS) for constraint in constraints):
        recommendations.append(
            "Bring compliance reviewers into the design authority so approvals run in parallel with build."
        )
    legacy = [constraint for constraint in constraints if contains_term(constraint, LEGACY_TERMS)]
    if legacy:
        recommendations.append(
            f"Fund a dedicated decoupling track so {ctx.name} is not gated by {lower_first(legacy[0])}."
        )
    if not constraints:
        recommendations.append(
            "Run a pre-mortem with sponsors to surface unstated constraints before Discovery closes."
        )
    if len(ctx.stakeholders) > 3:
        recommendations.append(
            f"Consolidate {len(ctx.stakeholders)} stakeholders into a single steering forum with explicit decision rights."
        )
    if not raw_kpis:
        recommendations.append(
            "Agree baseline KPIs before design sign-off so value can be proven at launch."
        )

    for default in DEFAULT_RECOMMENDATIONS:
        if len(recommendations) >= RECOMMENDATION_COUNT:
            break
        recommendations.append(default)
    return recommendations[:RECOMMENDATION_COUNT]
