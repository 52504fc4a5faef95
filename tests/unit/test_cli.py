"""Unit tests for the jsonrules CLI."""

import json

import pytest
from typer.testing import CliRunner

from jsonrules import __version__
from jsonrules.cli import app

RULES = {
    "name": {"required": True, "type": "string", "name": "Name", "constraints": {"length": [1, None]}},
    "tags": {
        "required": False,
        "type": "array",
        "items": {"*": {"type": "string", "name": "Tag", "constraints": {"length": [1, None]}}},
    },
}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def rules_file(tmp_path):
    path = tmp_path / "rules.json"
    path.write_text(json.dumps(RULES), encoding="utf-8")
    return path


def write_data(tmp_path, data):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestCheckCommand:
    """Test the check command."""

    def test_valid_document(self, runner, tmp_path, rules_file):
        data_file = write_data(tmp_path, {"name": "Ken", "tags": ["a"]})

        result = runner.invoke(app, ["check", str(rules_file), str(data_file)])

        assert result.exit_code == 0
        assert "data.json is valid" in result.stdout

    def test_invalid_document_table(self, runner, tmp_path, rules_file):
        data_file = write_data(tmp_path, {"tags": ["", "ok"]})

        result = runner.invoke(app, ["check", str(rules_file), str(data_file)])

        assert result.exit_code == 1
        assert "Validation Errors" in result.stdout
        assert "has 2 error(s)" in result.stdout

    def test_invalid_document_json(self, runner, tmp_path, rules_file):
        data_file = write_data(tmp_path, {"tags": ["", "ok"]})

        result = runner.invoke(app, ["check", str(rules_file), str(data_file), "--format", "json"])

        assert result.exit_code == 1
        report = json.loads(result.stdout)
        assert report["valid"] is False
        assert report["errors"] == {
            "name": ["Name is required"],
            "tags": ["Tag number 1 must have a length of at least 1"],
        }

    def test_format_from_config(self, runner, tmp_path, rules_file):
        data_file = write_data(tmp_path, {"name": "Ken"})
        config_file = tmp_path / "settings.json"
        config_file.write_text(json.dumps({"output": {"format": "json"}}), encoding="utf-8")

        result = runner.invoke(app, ["check", str(rules_file), str(data_file), "--config", str(config_file)])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"valid": True, "error_count": 0, "errors": {}}

    def test_malformed_rules(self, runner, tmp_path):
        rules_file = tmp_path / "rules.json"
        rules_file.write_text(json.dumps({"name": {"type": "string"}}), encoding="utf-8")
        data_file = write_data(tmp_path, {"name": "Ken"})

        result = runner.invoke(app, ["check", str(rules_file), str(data_file)])

        assert result.exit_code == 2
        assert "Invalid rules" in result.stdout

    def test_missing_data_file(self, runner, tmp_path, rules_file):
        result = runner.invoke(app, ["check", str(rules_file), str(tmp_path / "missing.json")])

        assert result.exit_code == 2
        assert "File not found" in result.stdout


class TestLintCommand:
    """Test the lint command."""

    def test_well_formed(self, runner, rules_file):
        result = runner.invoke(app, ["lint", str(rules_file)])

        assert result.exit_code == 0
        assert "rules.json is well formed" in result.stdout

    def test_unknown_type(self, runner, tmp_path):
        rules_file = tmp_path / "rules.json"
        rules_file.write_text(json.dumps({"when": {"required": True, "type": "date"}}), encoding="utf-8")

        result = runner.invoke(app, ["lint", str(rules_file)])

        assert result.exit_code == 2
        assert "Invalid rules" in result.stdout

    def test_broken_config_found_in_cwd(self, runner, rules_file, tmp_path, monkeypatch):
        (tmp_path / ".jsonrules.json").write_text("{not json", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["lint", str(rules_file)])

        assert result.exit_code == 2
        assert "Invalid JSON" in result.stdout

    def test_explicit_config(self, runner, rules_file, tmp_path, monkeypatch):
        (tmp_path / ".jsonrules.json").write_text("{not json", encoding="utf-8")
        good = tmp_path / "good.json"
        good.write_text(json.dumps({"logging": {"level": "debug"}}), encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        result = runner.invoke(app, ["lint", str(rules_file), "--config", str(good)])

        assert result.exit_code == 0
        assert "rules.json is well formed" in result.stdout


def test_version(runner):
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout
