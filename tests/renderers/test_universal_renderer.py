"""Tests for UniversalRenderer — format registry and dispatch."""

import pytest

from appsettingsenv.converters.flattener import flatten_to_records
from appsettingsenv.renderers.universal_renderer import (
    RENDERERS,
    UniversalRenderer,
    UnsupportedFormatError,
    estimate_output_sizes,
    render_records,
)

RECORDS = flatten_to_records({"A": "x", "B": {"C": 1}}).records


def test_docker_compose_dispatched():
    assert render_records(RECORDS, "docker-compose").startswith("environment:\n  - A=x")


def test_compose_alias():
    assert render_records(RECORDS, "compose") == render_records(RECORDS, "docker-compose")


def test_env_file_dispatched():
    assert "B__C=\"1\"" in render_records(RECORDS, "env-file")


def test_plain_text_dispatched():
    assert render_records(RECORDS, "plain-text") == "A=x\nB__C=1"


def test_partial_format_options_mapping():
    output = render_records(RECORDS, "plain-text", {"plain_text": {"include_export": True}})
    assert output.startswith("export A=x")


def test_unsupported_format_raises():
    with pytest.raises(UnsupportedFormatError, match="yaml") as exc_info:
        render_records(RECORDS, "yaml")
    assert exc_info.value.output_format == "yaml"


def test_supported_formats():
    formats = UniversalRenderer().supported_formats()
    assert {"docker-compose", "env-file", "plain-text"} <= set(formats)


def test_estimate_output_sizes():
    sizes = estimate_output_sizes(RECORDS)
    assert sizes["plain-text"] == len("A=x\nB__C=1")
    assert set(sizes) == {"docker-compose", "env-file", "plain-text"}


def test_registry_built_from_renderer_format_names():
    formats = UniversalRenderer().supported_formats()
    assert formats == ["docker-compose", "compose", "env-file", "plain-text"]
    for renderer_cls in RENDERERS:
        assert renderer_cls.format_name in formats
