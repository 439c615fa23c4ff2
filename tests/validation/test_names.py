"""Tests for advisory record name validation."""

from appsettingsenv.models.records import EnvironmentVariable
from appsettingsenv.validation.names import validate_environment_variable_names


def record(key, value="v"):
    return EnvironmentVariable(key=key, value=value, original_path=key, original_type="string")


def test_clean_records():
    assert validate_environment_variable_names([record("A"), record("B__C")]) == []


def test_duplicate_keys():
    warnings = validate_environment_variable_names([record("A"), record("A"), record("A")])
    assert warnings == ["Duplicate environment variable key: A"] * 2


def test_invalid_name():
    assert validate_environment_variable_names([record("1A")]) == ["Invalid environment variable name: 1A"]


def test_name_too_long():
    key = "K" * 256
    assert validate_environment_variable_names([record(key)]) == [
        f"Environment variable name too long (256 chars): {key}"
    ]


def test_value_too_long():
    warnings = validate_environment_variable_names([record("A", "x" * 32768)])
    assert warnings == ["Environment variable value too long (32768 chars) for key: A"]


def test_limits_are_inclusive():
    assert validate_environment_variable_names([record("K" * 255, "x" * 32767)]) == []
