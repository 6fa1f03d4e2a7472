"""CreativeBlueprintGenerator unit tests."""

import pytest

from blueprint_engine.engines.creative import CreativeBlueprint, CreativeBlueprintGenerator, CreativeInput


def _strings(value):
    if isinstance(value, str):
        yield value
    elif isinstance(value, dict):
        for item in value.values():
            yield from _strings(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _strings(item)


class TestDeterminism:
    def test_repeated_calls_are_identical(self, creative_generator, sample_creative_input):
        first = creative_generator.generate(sample_creative_input)
        second = creative_generator.generate(sample_creative_input)
        assert first == second
        assert first.to_json() == second.to_json()

    def test_separate_instances_agree(self, sample_creative_input):
        first = CreativeBlueprintGenerator().generate(sample_creative_input)
        second = CreativeBlueprintGenerator().generate(sample_creative_input)
        assert first.model_dump() == second.model_dump()


class TestTotality:
    def test_empty_input_fully_populated(self, creative_generator, empty_creative_input):
        blueprint = creative_generator.generate(empty_creative_input)
        for text in _strings(blueprint.model_dump()):
            assert text.strip()
            assert "undefined" not in text
            assert "None" not in text
            assert "{" not in text and "}" not in text
            assert ", ," not in text

    def test_empty_input_uses_default_palette(self, creative_generator, empty_creative_input):
        blueprint = creative_generator.generate(empty_creative_input)
        assert len(blueprint.style_guide.palette) == 5

    def test_empty_brand_capitalized_only_at_sentence_start(self, creative_generator, empty_creative_input):
        blueprint = creative_generator.generate(empty_creative_input)
        assert blueprint.narrative.positioning.startswith("The brand is ")
        assert blueprint.content.hero.startswith("The brand: ")
        assert blueprint.content.ctas[0] == "Start with the brand"
        for text in _strings(blueprint.model_dump()):
            assert ", The brand" not in text
            assert "with The brand" not in text
            assert "to The brand" not in text


PUNCTUATION_ONLY = [".", ",", "!?", " . ", "...", "?!."]


def _assert_no_dangling_separators(text):
    assert text.strip(), "blank string in blueprint"
    assert not text.startswith(","), text
    assert " ," not in text, text
    assert " ." not in text, text
    assert "  " not in text, text
    assert ", ," not in text, text


class TestPunctuationOnlyEntries:
    @pytest.mark.parametrize("entry", PUNCTUATION_ONLY)
    def test_every_field_treated_as_empty(self, creative_generator, entry):
        blueprint = creative_generator.generate(CreativeInput(
            brand_name=entry,
            product=entry,
            audience=entry,
            mood=entry,
            keywords=[entry],
            palette=[entry],
            differentiators=[entry],
        ))
        for text in _strings(blueprint.model_dump()):
            _assert_no_dangling_separators(text)
        assert blueprint == creative_generator.generate(CreativeInput())

    def test_mood_of_separators_falls_back(self, creative_generator):
        blueprint = creative_generator.generate(CreativeInput(mood=", / ,", differentiators=["."]))
        assert blueprint.narrative.voice.startswith("Confident, refined, and contemporary voice")
        assert blueprint.content.value_props[0] == creative_generator.generate(CreativeInput()).content.value_props[0]
        for text in _strings(blueprint.model_dump()):
            _assert_no_dangling_separators(text)

    def test_punctuation_dropped_from_real_entries(self, creative_generator):
        blueprint = creative_generator.generate(CreativeInput(
            mood="calm, ., precise",
            keywords=["!", "glass"],
            differentiators=["?", "Speed"],
        ))
        assert blueprint.narrative.voice == "Calm and precise voice, expressed through glass."
        assert blueprint.content.value_props[0].startswith("Speed, ")
        assert blueprint.content.ctas[2] == "Explore speed"


class TestImmutability:
    def test_sequence_fields_cannot_be_modified(self, creative_blueprint):
        with pytest.raises(AttributeError):
            creative_blueprint.content.ctas.append("tampered")
        with pytest.raises(TypeError):
            creative_blueprint.style_guide.palette[0] = None


class TestScenarios:
    def test_two_color_palette(self, creative_generator):
        blueprint = creative_generator.generate(CreativeInput(palette=["#FFFFFF", "#000000"]))
        palette = blueprint.style_guide.palette
        assert len(palette) == 2
        assert [token.value for token in palette] == ["#FFFFFF", "#000000"]

    def test_no_keywords_hero_prompt(self, creative_generator):
        blueprint = creative_generator.generate(CreativeInput(
            brand_name="Atlas",
            product="strategic operating system",
            mood="minimal, cinematic",
            keywords=[],
        ))
        hero = blueprint.prompts.hero
        assert hero
        assert "minimal and cinematic mood" in hero
        assert "strategic operating system" in hero
        assert "featuring" not in hero
        assert ", ," not in hero

    def test_default_form_blueprint(self, creative_blueprint):
        assert creative_blueprint.narrative.positioning.startswith(
            "Omar Atlas is the strategic operating system for visionary founders built for "
        )
        assert creative_blueprint.content.ctas[0] == "Start with Omar Atlas"
        assert creative_blueprint.style_guide.typography[0].font == "Neue Montreal"
        assert "#080C14" in creative_blueprint.prompts.hero


class TestCardinality:
    def test_prompt_keys(self, creative_blueprint):
        prompts = creative_blueprint.model_dump(by_alias=True)["prompts"]
        assert set(prompts) == {"hero", "background", "branding", "ux", "threeD"}

    def test_fixed_counts(self, creative_generator, empty_creative_input, sample_creative_input):
        for input_doc in (empty_creative_input, sample_creative_input):
            blueprint = creative_generator.generate(input_doc)
            assert len(blueprint.recommendations) == 4
            assert len(blueprint.content.ctas) == 3
            assert len(blueprint.content.value_props) == 3
            assert len(blueprint.figma_system.components) == 5
            assert len(blueprint.figma_system.flows) == 3
            assert len(blueprint.style_guide.typography) == 4


class TestRendering:
    def test_markdown_sections(self, creative_blueprint):
        markdown = creative_blueprint.to_markdown()
        assert markdown.startswith("# Creative Blueprint")
        for heading in (
            "## Narrative architecture",
            "## Midjourney production prompts",
            "### Hero Visual",
            "### Background System",
            "### Brand Signature",
            "### UI / UX Narrative",
            "### 3D Concept",
            "## Figma blueprint",
            "## Copy deck",
            "## Style & motion spec",
            "## Activation recommendations",
        ):
            assert heading in markdown

    def test_json_uses_camel_case(self, creative_blueprint):
        json_text = creative_blueprint.to_json()
        assert '"figmaSystem"' in json_text
        assert '"styleGuide"' in json_text
        assert '"valueProps"' in json_text
        assert '"threeD"' in json_text

    def test_json_round_trip(self, creative_blueprint):
        restored = CreativeBlueprint.model_validate_json(creative_blueprint.to_json())
        assert restored == creative_blueprint
