"""Unit tests for the PPT deck exporter."""

from io import BytesIO

import pytest
from pptx import Presentation

from blueprint_engine.engines.creative import CreativeInput
from blueprint_engine.exceptions import ExportError
from blueprint_engine.services.deck_exporter import export_deck, hex_to_rgb, is_hex_color


class TestHexHelpers:
    @pytest.mark.parametrize("token", ["#080C14", "F7F9FC", " #abcdef "])
    def test_hex_tokens(self, token):
        assert is_hex_color(token)

    @pytest.mark.parametrize("token", ["#FFF", "midnight navy", "#GGGGGG", "#1234567"])
    def test_non_hex_tokens(self, token):
        assert not is_hex_color(token)

    def test_hex_to_rgb(self):
        rgb = hex_to_rgb("#FF8000")
        assert (rgb[0], rgb[1], rgb[2]) == (255, 128, 0)


class TestExportDeck:
    def test_project_deck(self, project_blueprint):
        data = export_deck(project_blueprint)
        assert data[:2] == b"PK"
        prs = Presentation(BytesIO(data))
        assert len(prs.slides) == 11

    def test_creative_deck(self, creative_blueprint):
        data = export_deck(creative_blueprint, "Omar Atlas")
        prs = Presentation(BytesIO(data))
        assert len(prs.slides) == 9
        title_texts = [shape.text_frame.text for shape in prs.slides[0].shapes if shape.has_text_frame]
        assert "Omar Atlas" in title_texts

    def test_non_hex_palette_renders(self, creative_generator):
        blueprint = creative_generator.generate(CreativeInput(palette=["midnight navy", "#FFF", "#00FF00"]))
        prs = Presentation(BytesIO(export_deck(blueprint)))
        palette_slide = prs.slides[6]
        labels = " ".join(shape.text_frame.text for shape in palette_slide.shapes if shape.has_text_frame)
        assert "midnight navy" in labels

    def test_render_failure_wrapped(self, project_blueprint, monkeypatch):
        def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("blueprint_engine.services.deck_exporter.build_project_deck", broken)
        with pytest.raises(ExportError) as exc_info:
            export_deck(project_blueprint)
        assert exc_info.value.details == {"reason": "boom"}
