"""Tests for the end-to-end conversion service."""

import json
from unittest.mock import patch

import pytest

from appsettingsenv.models.records import ErrorType
from appsettingsenv.services.conversion_service import (
    convert,
    convert_to_docker_compose,
    convert_to_env_file,
    convert_to_plain_text,
    validate_appsettings_json,
)

CANONICAL = json.dumps(
    {
        "ConnectionStrings": {"DefaultConnection": "Server=localhost;Database=MyApp;"},
        "Logging": {"LogLevel": {"Default": "Information", "Microsoft": "Warning"}},
        "AllowedHosts": "*",
    },
    indent=2,
)


class TestConvert:
    def test_canonical_docker_compose(self):
        result = convert(CANONICAL, "docker-compose")
        assert result.success is True
        assert result.error is None
        assert [r.key for r in result.records] == [
            "ConnectionStrings__DefaultConnection",
            "Logging__LogLevel__Default",
            "Logging__LogLevel__Microsoft",
            "AllowedHosts",
        ]
        lines = result.output.splitlines()
        assert '  - AllowedHosts="*"' in lines
        assert "  - ConnectionStrings__DefaultConnection=Server=localhost;Database=MyApp;" in lines
        assert result.warnings == []

    def test_stats_are_reported(self):
        result = convert(CANONICAL, "env-file")
        assert result.stats.total_keys == 7
        assert result.stats.max_depth == 4
        assert result.stats.array_count == 0
        assert result.stats.recommendations == []

    def test_empty_object(self):
        result = convert("{}", "plain-text")
        assert result.success is True
        assert result.records == []
        assert result.warnings == []
        assert result.output == ""

    def test_malformed_input(self):
        result = convert('{"a": 1,}', "docker-compose")
        assert result.success is False
        assert result.error.type == ErrorType.INVALID_JSON
        assert result.error.message
        assert result.error.line_number == 1
        assert result.error.column_number is not None
        assert result.output is None

    def test_empty_input(self):
        result = convert("   ", "env-file")
        assert result.error.type == ErrorType.EMPTY_INPUT
        assert (result.error.line_number, result.error.column_number) == (1, 1)

    def test_array_root(self):
        result = convert("[1]", "env-file")
        assert result.error.type == ErrorType.UNSUPPORTED_TYPE

    def test_unsupported_format_keeps_warnings(self):
        result = convert('{"Servers": []}', "toml")
        assert result.success is False
        assert result.error.type == ErrorType.FORMAT_ERROR
        assert "toml" in result.error.message
        assert result.warnings == [
            'Array found at root level: "Servers" - ensure this is intentional',
            "Empty array found at path: Servers",
        ]

    def test_collapsed_array(self):
        result = convert('{"Servers": ["a", "b"]}', "plain-text", {"include_array_indices": False})
        assert [(r.key, r.value) for r in result.records] == [("Servers", "a,b")]
        assert result.output == "Servers=a,b"

    @pytest.mark.parametrize("mode, expected", [("empty", [("A", "")]), ("null", [("A", "null")]), ("omit", [])])
    def test_null_handling(self, mode, expected):
        result = convert('{"A": null}', "plain-text", {"null_handling": mode})
        assert [(r.key, r.value) for r in result.records] == expected

    def test_prefix_and_uppercase(self):
        result = convert('{"Logging": {"Level": "Debug"}}', "plain-text", {"prefix": "app", "naming_convention": "uppercase"})
        assert result.output == "app_LOGGING__LEVEL=Debug"

    def test_type_hints_enable_comments(self):
        result = convert('{"Port": 80}', "plain-text", {"include_type_hints": True})
        assert result.output == "# type: number, path: Port\nPort=80"

    def test_env_file_groups_by_conversion_separator(self):
        result = convert(
            '{"A": {"B": "x"}}', "env-file", {"key_separator": "_"}, {"env_file": {"quote_values": False}}
        )
        assert "# A configuration\nA_B=x" in result.output

    def test_duplicate_keys_are_reported(self):
        result = convert('{"a.b": "1", "a": {"b": "2"}}', "plain-text")
        assert "Duplicate environment variable key: a__b" in result.warnings
        assert result.success is True

    def test_invalid_options_reported(self):
        result = convert("{}", "plain-text", {"naming_convention": "camel"})
        assert result.success is False
        assert result.error.type == ErrorType.CONVERSION_FAILED

    def test_unexpected_error_is_caught(self):
        with patch("appsettingsenv.services.conversion_service.analyze_complexity", side_effect=RuntimeError("boom")):
            result = convert("{}", "plain-text")
        assert result.success is False
        assert result.error.type == ErrorType.CONVERSION_FAILED
        assert result.error.details == "boom"


class TestConvenienceWrappers:
    def test_docker_compose_map_style(self):
        result = convert_to_docker_compose('{"A": "x"}', use_array_format=False, indent_level=4)
        assert result.output == "environment:\n    A: x"

    def test_env_file_without_comments(self):
        result = convert_to_env_file('{"A": "x y"}', include_comments=False, quote_values=False)
        assert result.output == 'A="x y"'

    def test_plain_text_with_export(self):
        result = convert_to_plain_text('{"A": "x"}', {"prefix": "P"}, include_export=True)
        assert result.output == "export P_A=x"


class TestValidateAppsettingsJson:
    def test_valid_with_warnings(self):
        result = validate_appsettings_json('{"ConnectionStrings": {"Db": ""}}')
        assert result.is_valid is True
        assert result.warnings == ['ConnectionString "Db" is empty']
        assert result.error is None

    def test_invalid(self):
        result = validate_appsettings_json('{"a": ')
        assert result.is_valid is False
        assert result.error == "JSON is incomplete - missing closing brackets or quotes"
        assert result.line_number == 1

    def test_custom_root_array_exemptions(self):
        result = validate_appsettings_json('{"Origins": ["x"]}', allowed_root_arrays={"Origins"})
        assert result.warnings == []


class TestNumberEdgeCases:
    def test_overflowing_number_renders_as_infinity(self):
        result = convert('{"a": 1e400}', "plain-text")
        assert result.success is True
        assert result.output == "a=Infinity"

    def test_nan_literal_is_a_validation_failure(self):
        result = convert('{"a": NaN}', "plain-text")
        assert result.success is False
        assert result.error.type == ErrorType.INVALID_JSON
        assert (result.error.line_number, result.error.column_number) == (1, 7)

    def test_small_float_uses_short_exponent(self):
        result = convert('{"a": 0.0000001}', "plain-text")
        assert result.output == "a=1e-7"
