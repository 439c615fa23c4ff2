"""Tests for preset storage — config load/save."""

import json
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from appsettingsenv.models.config import ConverterConfig
from appsettingsenv.models.options import ConversionOptions
from appsettingsenv.utils.storage import load_config, save_config


class TestLoadConfig:
    def test_missing_file_returns_defaults(self, tmp_path):
        assert load_config(tmp_path / "nope.json") == ConverterConfig()

    def test_corrupt_file_returns_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_config(path) == ConverterConfig()

    def test_invalid_values_return_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"output_format": "xml"}), encoding="utf-8")
        assert load_config(path) == ConverterConfig()

    def test_default_location(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"output_format": "env-file"}), encoding="utf-8")
        with patch("appsettingsenv.utils.storage.CONFIG_FILE", path):
            assert load_config().output_format == "env-file"


class TestSaveConfig:
    def test_roundtrip(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        config = ConverterConfig(
            output_format="plain-text",
            conversion=ConversionOptions(prefix="app", naming_convention="uppercase"),
        )
        save_config(config, path)
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved["conversion"]["prefix"] == "app_"
        assert load_config(path) == config

    def test_default_location(self, tmp_path):
        with (
            patch("appsettingsenv.utils.storage.CONFIG_DIR", tmp_path),
            patch("appsettingsenv.utils.storage.CONFIG_FILE", tmp_path / "config.json"),
        ):
            save_config(ConverterConfig())
        assert (tmp_path / "config.json").exists()


class TestOutputFormatField:
    def test_compose_alias_accepted(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"output_format": "compose"}), encoding="utf-8")
        assert load_config(path).output_format == "compose"

    def test_unknown_format_rejected(self):
        with pytest.raises(ValidationError):
            ConverterConfig(output_format="xml")
