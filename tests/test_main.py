"""Tests for the resume-fit command line."""
import json

import pytest

from resume_fit import paths
from resume_fit.main import build_parser, main


@pytest.fixture(autouse=True)
def isolated_output_dir(tmp_path, monkeypatch):
    output_dir = tmp_path / "output"
    monkeypatch.setattr(paths, "OUTPUT_DIR", output_dir)
    monkeypatch.setattr(paths, "LOG_DIR", output_dir / "logs")
    return output_dir


class TestFitCommand:

    def test_fit(self, write_json, dense_resume, tmp_path, capsys):
        input_path = write_json("resume.json", dense_resume)
        output_path = tmp_path / "fitted.json"

        exit_code = main(["--no-log-file", "fit", str(input_path), "-o", str(output_path)])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "compact mode" in out
        assert "Experiences: 5 moved to achievements" in out
        assert json.loads(output_path.read_text(encoding="utf-8"))["_layout"]["compactMode"] is True

    def test_fit_prints_validation_warnings(self, write_json, tmp_path, capsys):
        input_path = write_json("resume.json", {"name": "Jane", "skills": "Go"})

        exit_code = main(["--no-log-file", "fit", str(input_path), "-o", str(tmp_path / "fitted.json")])

        assert exit_code == 0
        assert "'skills' must be a list" in capsys.readouterr().out

    def test_fit_missing_file(self, tmp_path, capsys):
        exit_code = main(["--no-log-file", "fit", str(tmp_path / "missing.json"), "-o", str(tmp_path / "o.json")])

        assert exit_code == 1
        assert "[error]" in capsys.readouterr().out


class TestDensityCommand:

    def test_density(self, write_json, capsys):
        input_path = write_json("resume.json", {"name": "Abcdefghij", "skills": ["Go", "Rust"]})

        exit_code = main(["--no-log-file", "density", str(input_path)])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "total" in out
        assert "17" in out
        assert "compact mode: no" in out
        assert "font scale:   1.00" in out

    def test_density_unreadable(self, tmp_path, capsys):
        exit_code = main(["--no-log-file", "density", str(tmp_path / "missing.json")])
        assert exit_code == 1


class TestParser:

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        args = build_parser().parse_args(["density", "resume.json"])
        assert args.log_level == "DEBUG"


class TestOutputDirs:

    def test_main_creates_output_and_log_dirs(self, write_json, isolated_output_dir):
        input_path = write_json("resume.json", {"name": "Jane"})

        assert main(["--no-log-file", "density", str(input_path)]) == 0

        assert isolated_output_dir.is_dir()
        assert (isolated_output_dir / "logs").is_dir()

    def test_ensure_dirs_is_repeatable(self, isolated_output_dir):
        paths.ensure_dirs()
        paths.ensure_dirs()
        assert (isolated_output_dir / "logs").is_dir()
