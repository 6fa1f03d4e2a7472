"""Project engine input and blueprint models."""

from pydantic import Field

from blueprint_engine.models.common import BlueprintRecord, DocumentSection, EngineInput


class ProjectInput(EngineInput):
    """
    프로젝트 엔진 입력 레코드.

    목록 필드는 이미 토큰화된 상태로 전달됩니다 (폼 레이어 담당).
    모든 필드는 비어 있어도 됩니다.
    """
    name: str = Field("", description="이니셔티브 이름")
    vision: str = Field("", description="비전 서술")
    industry: str = Field("", description="산업 맥락")
    timeframe: str = Field("", description="기간 (예: 16-week sprint program)")
    budget: str = Field("", description="예산 가이드레일")
    goals: list[str] = Field(default_factory=list, description="주요 목표")
    kpis: list[str] = Field(default_factory=list, description="성공 KPI")
    stakeholders: list[str] = Field(default_factory=list, description="이해관계자 및 스폰서")
    team: list[str] = Field(default_factory=list, description="핵심 팀 역량")
    constraints: list[str] = Field(default_factory=list, description="제약 및 주의사항")


class ProjectSummary(BlueprintRecord):
    """North-star 서사."""
    north_star: str
    positioning: str
    value_streams: tuple[str, ...]


class Workstream(BlueprintRecord):
    """WBS 워크스트림 (담당자 + 작업 항목)."""
    title: str
    owner: str
    work_items: tuple[str, ...]


class Risk(BlueprintRecord):
    """리스크 항목."""
    title: str
    probability: str = Field(..., description="High / Medium / Low")
    mitigation: str


class ProgramArchitecture(BlueprintRecord):
    """프로그램 아키텍처."""
    scope: str
    objectives: tuple[str, ...]
    kpis: tuple[str, ...]
    deliverables: tuple[str, ...]
    wbs: tuple[Workstream, ...]
    milestones: tuple[str, ...]
    risks: tuple[Risk, ...]
    dependencies: tuple[str, ...]


class ExecutionPhase(BlueprintRecord):
    """실행 경로 단계 (시간 순서)."""
    name: str
    focus: str
    steps: tuple[str, ...]


class RaciEntry(BlueprintRecord):
    """RACI 매트릭스 행."""
    activity: str
    responsible: str
    accountable: str
    consulted: str
    informed: str


class TimelineEntry(BlueprintRecord):
    """타임라인 구간."""
    period: str
    focus: str
    checkpoints: tuple[str, ...]


class RoadmapEntry(BlueprintRecord):
    """로드맵 구간 (Now / Next / Later)."""
    horizon: str
    outcomes: tuple[str, ...]
    enablers: tuple[str, ...]


class ProjectDocuments(BlueprintRecord):
    """즉시 배포 가능한 문서 묶음."""
    charter: tuple[DocumentSection, ...]
    sow: tuple[DocumentSection, ...]
    raci: tuple[RaciEntry, ...]
    timeline: tuple[TimelineEntry, ...]
    roadmap: tuple[RoadmapEntry, ...]


class ProjectBlueprint(BlueprintRecord):
    """프로젝트 블루프린트 (생성 결과 전체)."""
    summary: ProjectSummary
    architecture: ProgramArchitecture
    execution_path: tuple[ExecutionPhase, ...]
    documents: ProjectDocuments
    recommendations: tuple[str, ...]

    def to_markdown(self, title: str = "Project Blueprint") -> str:
        """마크다운 포맷으로 변환하는 함수"""
        lines = [f"# {title}", ""]

        # 1. North-star 서사
        lines.append("## North-star narrative")
        lines.append("")
        lines.append(f"**North star**: {self.summary.north_star}")
        lines.append("")
        lines.append(f"**Positioning**: {self.summary.positioning}")
        lines.append("")
        lines.append("### Value streams")
        lines.extend(f"- {item}" for item in self.summary.value_streams)
        lines.append("")

        # 2. 프로그램 아키텍처
        arch = self.architecture
        lines.append("## Program architecture")
        lines.append("")
        lines.append(f"**Scope**: {arch.scope}")
        lines.append("")
        for label, items in (
            ("Objectives", arch.objectives),
            ("KPIs", arch.kpis),
            ("Deliverables", arch.deliverables),
        ):
            lines.append(f"### {label}")
            lines.extend(f"- {item}" for item in items)
            lines.append("")

        # 3. WBS
        lines.append("## Work breakdown structure")
        lines.append("")
        for workstream in arch.wbs:
            lines.append(f"### {workstream.title}")
            lines.append(f"**Owner**: {workstream.owner}")
            lines.extend(f"- {item}" for item in workstream.work_items)
            lines.append("")

        # 4. 실행 경로
        lines.append("## Execution pathway")
        lines.append("")
        for idx, phase in enumerate(self.execution_path, 1):
            lines.append(f"### {idx}. {phase.name}")
            lines.append(phase.focus)
            lines.extend(f"- {step}" for step in phase.steps)
            lines.append("")

        # 5. 마일스톤
        lines.append("## Milestones & cadence")
        lines.append("")
        lines.extend(f"- {milestone}" for milestone in arch.milestones)
        lines.append("")

        # 6. 리스크 및 의존성
        lines.append("## Risks & dependencies")
        lines.append("")
        lines.append("| Probability | Risk | Mitigation |")
        lines.append("|-------------|------|------------|")
        for risk in arch.risks:
            lines.append(f"| {risk.probability} | {risk.title} | {risk.mitigation} |")
        lines.append("")
        lines.append("### Dependencies")
        lines.extend(f"- {dep}" for dep in arch.dependencies)
        lines.append("")

        # 7. 권고사항
        lines.append("## Strategic recommendations")
        lines.append("")
        lines.extend(f"- {rec}" for rec in self.recommendations)
        lines.append("")

        # 8. 문서
        docs = self.documents
        lines.append("## Ready-to-deploy documents")
        lines.append("")
        for doc_title, sections in (
            ("Project Charter", docs.charter),
            ("Statement of Work", docs.sow),
        ):
            lines.append(f"### {doc_title}")
            lines.append("")
            for section in sections:
                lines.append(f"#### {section.title}")
                lines.extend(f"- {item}" for item in section.items)
                lines.append("")

        lines.append("### RACI Matrix")
        lines.append("")
        lines.append("| Activity | Responsible | Accountable | Consulted | Informed |")
        lines.append("|----------|-------------|-------------|-----------|----------|")
        for entry in docs.raci:
            lines.append(
                f"| {entry.activity} | {entry.responsible} | {entry.accountable} "
                f"| {entry.consulted} | {entry.informed} |"
            )
        lines.append("")

        lines.append("### Timeline")
        lines.append("")
        for entry in docs.timeline:
            lines.append(f"#### {entry.period}")
            lines.append(entry.focus)
            lines.extend(f"- {checkpoint}" for checkpoint in entry.checkpoints)
            lines.append("")

        lines.append("### Roadmap")
        lines.append("")
        for entry in docs.roadmap:
            lines.append(f"#### {entry.horizon}")
            lines.append("**Outcomes**:")
            lines.extend(f"- {outcome}" for outcome in entry.outcomes)
            lines.append("**Enablers**:")
            lines.extend(f"- {enabler}" for enabler in entry.enablers)
            lines.append("")

        # 바닥글
        lines.append("---")
        lines.append("*Generated by the Project Command Engine.*")

        return "\n".join(lines)

    def to_json(self) -> str:
        """JSON 포맷으로 변환하는 함수 (camelCase 키)"""
        return self.model_dump_json(indent=2, by_alias=True)
