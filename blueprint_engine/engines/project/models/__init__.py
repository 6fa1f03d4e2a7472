"""Project engine models."""

from .project import (
    ProjectInput,
    ProjectSummary,
    Workstream,
    Risk,
    ProgramArchitecture,
    ExecutionPhase,
    RaciEntry,
    TimelineEntry,
    RoadmapEntry,
    ProjectDocuments,
    ProjectBlueprint,
)

__all__ = [
    "ProjectInput",
    "ProjectSummary",
    "Workstream",
    "Risk",
    "ProgramArchitecture",
    "ExecutionPhase",
    "RaciEntry",
    "TimelineEntry",
    "RoadmapEntry",
    "ProjectDocuments",
    "ProjectBlueprint",
]
