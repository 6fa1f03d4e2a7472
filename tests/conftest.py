"""공유 pytest fixture 모음."""

import pytest

from blueprint_engine.engines.creative import CreativeBlueprintGenerator, CreativeInput
from blueprint_engine.engines.project import ProjectBlueprintGenerator, ProjectInput
from blueprint_engine.models.forms import CreativeForm, ProjectForm


@pytest.fixture
def project_generator():
    return ProjectBlueprintGenerator()


@pytest.fixture
def creative_generator():
    return CreativeBlueprintGenerator()


@pytest.fixture
def sample_project_input():
    """기본 폼 값을 토큰화한 ProjectInput fixture."""
    return ProjectForm().to_input()


@pytest.fixture
def empty_project_input():
    """모든 필드가 비어 있는 ProjectInput fixture."""
    return ProjectInput()


@pytest.fixture
def scenario_project_input():
    """목표 2개, KPI 1개, 팀 2명인 ProjectInput fixture."""
    return ProjectInput(
        name="Margin Reset",
        vision="Rebuild the operating model around profitable growth",
        industry="Retail",
        timeframe="6-month program",
        budget="$400K",
        goals=["Cut costs", "Grow revenue"],
        kpis=["Margin %"],
        stakeholders=["CFO"],
        team=["PM", "Engineer"],
        constraints=["Tight holiday freeze"],
    )


@pytest.fixture
def sample_creative_input():
    """기본 폼 값을 토큰화한 CreativeInput fixture."""
    return CreativeForm().to_input()


@pytest.fixture
def empty_creative_input():
    """모든 필드가 비어 있는 CreativeInput fixture."""
    return CreativeInput()


@pytest.fixture
def project_blueprint(project_generator, sample_project_input):
    return project_generator.generate(sample_project_input)


@pytest.fixture
def creative_blueprint(creative_generator, sample_creative_input):
    return creative_generator.generate(sample_creative_input)
