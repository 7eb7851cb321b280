"""Tests for the layout fit agent tool."""
import json

import pytest

from resume_fit.tools import LayoutFitTool


@pytest.fixture
def fit_tool():
    """Create a LayoutFitTool instance."""
    return LayoutFitTool()


class TestLayoutFitTool:
    """Tests for LayoutFitTool."""

    def test_tool_metadata(self, fit_tool):
        assert fit_tool.name == "resume_layout_fit"
        assert "single printable page" in fit_tool.description

    def test_fit_file(self, fit_tool, write_json, dense_resume, tmp_path):
        input_path = write_json("resume.json", dense_resume)
        output_path = tmp_path / "fitted.json"

        result = json.loads(fit_tool._run(str(input_path), str(output_path)))

        assert result["status"] == "success"
        assert result["compact_mode"] is True
        assert result["moved_experiences"] == 5
        assert "compact mode" in result["summary"]
        fitted = json.loads(output_path.read_text(encoding="utf-8"))
        assert len(fitted["experience"]) == 3
        assert fitted["_layout"]["maxExperienceItems"] == 3

    def test_missing_file_returns_error(self, fit_tool, tmp_path):
        result = json.loads(fit_tool._run(str(tmp_path / "missing.json"), str(tmp_path / "fitted.json")))

        assert result["status"] == "error"
        assert result["summary"].startswith("[error]")

    def test_args_schema_ignores_extra_fields(self, fit_tool):
        args = fit_tool.args_schema(input_path="resume.json", unexpected="value")
        assert args.input_path == "resume.json"
        assert args.output_path is None
