"""Unit tests for the blueprint maker CLI script."""

import json

from blueprint_engine.scripts.blueprint_maker import main


class TestBlueprintMaker:
    def test_project_outputs_written(self, tmp_path):
        exit_code = main(["--engine", "project", "--output-dir", str(tmp_path)])

        assert exit_code == 0
        md_files = list(tmp_path.glob("PROJECT-*.md"))
        json_files = list(tmp_path.glob("PROJECT-*.json"))
        assert len(md_files) == 1
        assert len(json_files) == 1
        assert md_files[0].read_text(encoding="utf-8").startswith("# Project Blueprint")

    def test_creative_with_input_and_pptx(self, tmp_path):
        input_path = tmp_path / "brief.json"
        input_path.write_text(json.dumps({"brandName": "Atlas", "keywords": ["glass"]}), encoding="utf-8")
        out_dir = tmp_path / "out"

        exit_code = main(["--engine", "creative", "--input", str(input_path),
                          "--output-dir", str(out_dir), "--pptx"])

        assert exit_code == 0
        assert len(list(out_dir.glob("CREATIVE-*.pptx"))) == 1
        data = json.loads(next(out_dir.glob("CREATIVE-*.json")).read_text(encoding="utf-8"))
        assert data["content"]["ctas"][0] == "Start with Atlas"

    def test_missing_input_file(self, tmp_path):
        exit_code = main(["--input", str(tmp_path / "missing.json"), "--output-dir", str(tmp_path)])

        assert exit_code == 1
