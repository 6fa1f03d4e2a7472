"""Unit tests for raw form models."""

import pytest
from unittest.mock import patch, MagicMock

from blueprint_engine.exceptions import InputValidationError
from blueprint_engine.models.forms import CreativeForm, ProjectForm

SETTINGS_PATH = "blueprint_engine.utils.validation.get_settings"


def _make_settings(**overrides):
    defaults = {
        "max_field_length": 4000,
        "max_items_per_field": 50,
    }
    defaults.update(overrides)
    settings = MagicMock()
    for k, v in defaults.items():
        setattr(settings, k, v)
    return settings


class TestProjectForm:
    def test_defaults_are_reset_state(self):
        form = ProjectForm()
        assert form.name == "Command Atlas Transformation"
        assert form.timeframe == "16-week sprint program"

    def test_to_input_tokenizes_lists(self):
        project = ProjectForm().to_input()
        assert project.goals == [
            "Compress decision cycles for executives",
            "Digitize cross-functional playbooks",
            "Prove measurable ROI within one quarter",
        ]
        assert project.team[-1] == "Change Lead"
        assert len(project.stakeholders) == 4

    def test_commas_and_blank_lines(self):
        project = ProjectForm(goals="Cut costs, Grow revenue\n\n", kpis="").to_input()
        assert project.goals == ["Cut costs", "Grow revenue"]
        assert project.kpis == []

    def test_field_too_long(self):
        with patch(SETTINGS_PATH, return_value=_make_settings(max_field_length=30)):
            with pytest.raises(InputValidationError) as exc_info:
                ProjectForm().to_input()
        assert exc_info.value.details["field"] == "vision"

    def test_too_many_items(self):
        with patch(SETTINGS_PATH, return_value=_make_settings(max_items_per_field=2)):
            with pytest.raises(InputValidationError) as exc_info:
                ProjectForm(name="A", vision="B", industry="C", budget="D", timeframe="E").to_input()
        assert exc_info.value.details["field"] == "goals"


class TestCreativeForm:
    def test_defaults_are_reset_state(self):
        creative = CreativeForm().to_input()
        assert creative.brand_name == "Omar Atlas"
        assert creative.palette == ["#080C14", "#121C2B", "#2D4059", "#8EA7C2", "#F7F9FC"]
        assert creative.keywords[1] == "architectural lighting"

    def test_camel_case_payload(self):
        form = CreativeForm.model_validate({"brandName": "Atlas", "palette": "red,blue"})
        creative = form.to_input()
        assert creative.brand_name == "Atlas"
        assert creative.palette == ["red", "blue"]

    def test_dump_by_alias(self):
        dumped = CreativeForm().model_dump(by_alias=True)
        assert "brandName" in dumped
