"""``.env`` file renderer with per-section grouping."""

from __future__ import annotations

import re
from collections.abc import Sequence

from appsettingsenv.models.options import EnvFileOptions
from appsettingsenv.models.records import EnvironmentVariable

from .base import BaseRenderer

ROOT_SECTION = "root"
FILE_HEADER = (
    "# Generated from appsettings.json",
    "# This file contains environment variables for your application",
)

_ENV_SPECIAL_CHARS = re.compile(r"[\s#\"'$\\`]")
_ENV_ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def needs_env_quoting(value: str) -> bool:
    """Return True if a .env value contains whitespace or shell-special characters."""
    return bool(_ENV_SPECIAL_CHARS.search(value))


def escape_env_value(value: str, force_quotes: bool = False) -> str:
    """Double-quote and backslash-escape a value when required or forced."""
    if value == "":
        return '""'
    if not (force_quotes or needs_env_quoting(value)):
        return value
    escaped = "".join(_ENV_ESCAPES.get(ch, ch) for ch in value)
    return f'"{escaped}"'


def group_by_section(
    records: Sequence[EnvironmentVariable], separator: str = "__"
) -> dict[str, list[EnvironmentVariable]]:
    """Group records by the key segment before the first separator, in first-seen order."""
    grouped: dict[str, list[EnvironmentVariable]] = {}
    for record in records:
        section, sep, _ = record.key.partition(separator)
        grouped.setdefault(section if sep else ROOT_SECTION, []).append(record)
    return grouped


class EnvFileRenderer(BaseRenderer):
    """Renders records as a ``.env`` file."""

    format_name = "env-file"
    options_field = "env_file"

    def render(self, records: Sequence[EnvironmentVariable], options: EnvFileOptions | None = None) -> str:
        opts = options or EnvFileOptions()
        lines: list[str] = []
        if opts.include_comments:
            lines.extend(FILE_HEADER)
            lines.append("")

        for section, members in group_by_section(records, opts.key_separator).items():
            if opts.include_comments and section != ROOT_SECTION:
                lines.append(f"# {section} configuration")
            for record in members:
                if opts.include_comments and record.original_type != "string":
                    lines.append(f"# Original type: {record.original_type}")
                    if record.original_path:
                        lines.append(f"# JSON path: {record.original_path}")
                lines.append(f"{record.key}={escape_env_value(record.value, opts.quote_values)}")
            lines.append("")

        while lines and lines[-1] == "":
            lines.pop()
        return "\n".join(lines)
