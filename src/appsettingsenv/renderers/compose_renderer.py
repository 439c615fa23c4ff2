"""Docker Compose ``environment:`` YAML fragment renderer."""

from __future__ import annotations

import re
from collections.abc import Sequence

from appsettingsenv.models.options import ComposeOptions
from appsettingsenv.models.records import EnvironmentVariable

from .base import BaseRenderer, type_hint_comment

# Scalars a YAML parser would resolve to a bool, null or number.
_YAML_AMBIGUOUS = re.compile(r"true|false|null|yes|no|on|off|\d+\.?\d*|[0-9]+e[0-9]+", re.IGNORECASE | re.ASCII)
_YAML_INDICATORS = re.compile(r"[:\[\]{}|>*&!%@`]")


def needs_yaml_quoting(value: str) -> bool:
    """Return True if ``value`` must be double-quoted to stay a YAML string."""
    return (
        value == ""
        or bool(_YAML_AMBIGUOUS.fullmatch(value))
        or value[0] in "+-"
        or bool(_YAML_INDICATORS.search(value))
        or value[0].isspace()
        or value[-1].isspace()
        or "#" in value
        or '"' in value
        or "'" in value
    )


def escape_yaml_value(value: str) -> str:
    """Quote a value for a Compose file when YAML would misread it."""
    if not needs_yaml_quoting(value):
        return value
    escaped = value.replace('"', '\\"')
    return f'"{escaped}"'


class ComposeRenderer(BaseRenderer):
    """Renders records as a Docker Compose ``environment:`` block."""

    format_name = "docker-compose"
    options_field = "docker_compose"
    aliases = ("compose",)

    def render(self, records: Sequence[EnvironmentVariable], options: ComposeOptions | None = None) -> str:
        opts = options or ComposeOptions()
        indent = " " * opts.indent_level
        lines = ["environment:"]
        for record in records:
            if opts.include_type_hints:
                comment = type_hint_comment(record)
                if comment:
                    lines.append(f"{indent}{comment}")
            value = escape_yaml_value(record.value)
            if opts.use_array_format:
                lines.append(f"{indent}- {record.key}={value}")
            else:
                lines.append(f"{indent}{record.key}: {value}")
        return "\n".join(lines)
