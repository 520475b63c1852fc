"""
Tests for the testscribe command line.
"""

import json
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest
from typer.testing import CliRunner

from testscribe import __version__
from testscribe.cli import app
from testscribe.reporting import SuiteReport, save_report_based_on_type

runner = CliRunner()


@pytest.fixture
def saved_report(failed_suite: SuiteReport, tmp_path: Path) -> Path:
    return save_report_based_on_type(failed_suite, "JSON", "regression", tmp_path)


class TestMainCLI:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self) -> None:
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("show", "convert", "validate"):
            assert command in result.output

    def test_invalid_log_level(self, saved_report: Path) -> None:
        result = runner.invoke(app, ["--log-level", "LOUD", "show", str(saved_report)])
        assert result.exit_code != 0


class TestShowCommand:
    def test_prints_summary(self, saved_report: Path) -> None:
        result = runner.invoke(app, ["--log-level", "debug", "show", str(saved_report)])

        assert result.exit_code == 0
        assert "Suite Report: regression" in result.output
        assert "broken" in result.output

    def test_rejects_non_json(self, tmp_path: Path) -> None:
        path = tmp_path / "report.xml"
        path.write_text("<TestsReport/>")

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 1
        assert "Not a JSON report" in result.output

    def test_rejects_malformed_report(self, tmp_path: Path) -> None:
        path = tmp_path / "report.json"
        path.write_text(json.dumps({"reports": []}))

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 1
        assert "Malformed report" in result.output

    def test_rejects_top_level_list(self, tmp_path: Path) -> None:
        path = tmp_path / "report.json"
        path.write_text("[]")

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Malformed report" in result.output

    def test_rejects_wrongly_typed_steps(self, tmp_path: Path) -> None:
        path = tmp_path / "report.json"
        path.write_text(json.dumps({"name": "s", "reports": [{"name": "t", "steps": 5}]}))

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Malformed report" in result.output

    def test_null_steps_are_shown_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "report.json"
        path.write_text(json.dumps({"name": "s", "reports": [{"name": "t", "steps": None}]}))

        result = runner.invoke(app, ["show", str(path)])

        assert result.exit_code == 0
        assert "Suite Report: s" in result.output


class TestConvertCommand:
    def test_json_to_xml(self, saved_report: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            ["convert", str(saved_report), "--format", "xml", "--name", "out", "--output-dir", str(tmp_path)],
        )

        assert result.exit_code == 0
        root = ET.parse(tmp_path / "out.xml").getroot()
        assert root.get("name") == "regression"
        assert root.get("failures") == "1"

    def test_uses_settings_file(self, saved_report: Path, tmp_path: Path) -> None:
        settings = tmp_path / "testscribe.yaml"
        settings.write_text(f"version: 1\nreport:\n  format: XML\n  name: from-config\n  path: {tmp_path}\n")

        result = runner.invoke(app, ["convert", str(saved_report), "--config", str(settings)])

        assert result.exit_code == 0
        assert (tmp_path / "from-config.xml").exists()

    def test_unsupported_format(self, saved_report: Path, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["convert", str(saved_report), "--format", "yaml", "--output-dir", str(tmp_path)]
        )

        assert result.exit_code == 1
        assert "unsupported report format" in result.output
        assert not (tmp_path / "regression.yaml").exists()

    def test_invalid_settings(self, saved_report: Path, tmp_path: Path) -> None:
        settings = tmp_path / "testscribe.yaml"
        settings.write_text("version: 1\nreport:\n  format: csv\n")

        result = runner.invoke(app, ["convert", str(saved_report), "--config", str(settings)])

        assert result.exit_code == 1
        assert "Invalid settings" in result.output


class TestValidateCommand:
    def test_valid_settings(self, tmp_path: Path) -> None:
        settings = tmp_path / "testscribe.yaml"
        settings.write_text("version: 1\nreport:\n  format: json\n  name: nightly\n")

        result = runner.invoke(app, ["validate", str(settings)])

        assert result.exit_code == 0
        assert "Valid settings" in result.output
        assert "nightly.json" in result.output

    def test_invalid_settings(self, tmp_path: Path) -> None:
        settings = tmp_path / "testscribe.yaml"
        settings.write_text("report: {}\n")

        result = runner.invoke(app, ["validate", str(settings)])

        assert result.exit_code == 1
        assert "Validation failed" in result.output
