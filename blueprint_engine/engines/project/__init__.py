"""Project Command Engine - project intent to program-management blueprint."""

from .project_generator import ProjectBlueprintGenerator
from .models import (
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
    "ProjectBlueprintGenerator",
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
