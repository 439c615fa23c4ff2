"""Plain ``KEY=value`` shell-style renderer."""

from __future__ import annotations

import re
from collections.abc import Sequence

from appsettingsenv.models.options import PlainTextOptions
from appsettingsenv.models.records import EnvironmentVariable

from .base import BaseRenderer, type_hint_comment

_SHELL_SAFE = re.compile(r"[A-Za-z0-9_./:-]+")


def needs_shell_quoting(value: str) -> bool:
    """Return True unless the value consists only of shell-safe characters."""
    return not _SHELL_SAFE.fullmatch(value)


def escape_shell_value(value: str) -> str:
    """Single-quote a value for POSIX shells, splicing in literal single quotes."""
    if value == "":
        return "''"
    if not needs_shell_quoting(value):
        return value
    escaped = value.replace("'", "'\"'\"'")
    return f"'{escaped}'"


class PlainTextRenderer(BaseRenderer):
    """Renders one ``[export ]KEY<sep>value`` line per record."""

    format_name = "plain-text"
    options_field = "plain_text"

    def render(self, records: Sequence[EnvironmentVariable], options: PlainTextOptions | None = None) -> str:
        opts = options or PlainTextOptions()
        export = "export " if opts.include_export else ""
        lines: list[str] = []
        for record in records:
            if opts.include_type_hints:
                comment = type_hint_comment(record)
                if comment:
                    lines.append(comment)
            lines.append(f"{export}{record.key}{opts.separator}{escape_shell_value(record.value)}")
        return "\n".join(lines)
