"""Unit tests for configuration management."""

import json

import pytest

from jsonrules.config import (
    CONFIG_FILE_NAME,
    JsonRulesConfig,
    LogLevel,
    OutputFormat,
    ValidatorConfig,
    find_config_file,
    load_config,
)


class TestValidatorConfig:
    """Test ValidatorConfig model."""

    def test_defaults(self):
        config = ValidatorConfig()
        assert config.default_name == "This value"
        assert config.path_separator == "."

    def test_aliases(self):
        config = ValidatorConfig(**{"defaultName": "Field", "pathSeparator": "/"})
        assert config.default_name == "Field"
        assert config.path_separator == "/"

    @pytest.mark.parametrize("separator", ["", "*"])
    def test_invalid_separator(self, separator):
        with pytest.raises(ValueError):
            ValidatorConfig(path_separator=separator)

    def test_blank_default_name(self):
        with pytest.raises(ValueError):
            ValidatorConfig(default_name="  ")


class TestJsonRulesConfig:
    """Test complete JsonRulesConfig model."""

    def test_defaults(self):
        config = JsonRulesConfig()
        assert config.logging.level == LogLevel.WARN.value
        assert config.output.format == OutputFormat.TABLE.value

    def test_from_dict(self):
        config = JsonRulesConfig(**{
            "validator": {"defaultName": "Field"},
            "output": {"format": "json"},
            "logging": {"level": "debug"},
        })
        assert config.validator.default_name == "Field"
        assert config.output.format == "json"
        assert config.logging.level == "debug"

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValueError):
            JsonRulesConfig(**{"unknown": {}})


class TestLoadConfig:
    """Test configuration loading."""

    def test_load_from_file(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text(json.dumps({"validator": {"pathSeparator": "/"}}), encoding="utf-8")

        config = load_config(config_file)
        assert config.validator.path_separator == "/"

    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.json")
        assert config == JsonRulesConfig()

    def test_invalid_json(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(config_file)

    def test_invalid_config(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text(json.dumps({"logging": {"level": "loud"}}), encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to load config"):
            load_config(config_file)

    def test_find_config_in_parent(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("{}", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == config_file.resolve()

    def test_find_config_prefers_nearest(self, tmp_path):
        (tmp_path / CONFIG_FILE_NAME).write_text("{}", encoding="utf-8")
        nested = tmp_path / "a"
        nested.mkdir()
        nearest = nested / CONFIG_FILE_NAME
        nearest.write_text("{}", encoding="utf-8")

        assert find_config_file(nested) == nearest.resolve()

    def test_find_config_skips_directories(self, tmp_path):
        config_file = tmp_path / CONFIG_FILE_NAME
        config_file.write_text("{}", encoding="utf-8")
        nested = tmp_path / "a"
        (nested / CONFIG_FILE_NAME).mkdir(parents=True)

        assert find_config_file(nested) == config_file.resolve()
