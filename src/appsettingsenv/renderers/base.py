"""Base class and shared helpers for output renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from appsettingsenv.models.records import EnvironmentVariable


def type_hint_comment(record: EnvironmentVariable) -> str:
    """Build a ``# type: ..., array index: ..., path: ...`` comment, or ``""``."""
    hints: list[str] = []
    if record.original_type != "string":
        hints.append(f"type: {record.original_type}")
    if record.is_array_element and record.array_index is not None:
        hints.append(f"array index: {record.array_index}")
    if record.original_path:
        hints.append(f"path: {record.original_path}")
    return f"# {', '.join(hints)}" if hints else ""


class BaseRenderer(ABC):
    """Abstract base class for all output renderers.

    Renderers are stateless: ``render`` is a pure function of its arguments.
    """

    format_name: str = ""
    options_field: str = ""
    aliases: tuple[str, ...] = ()

    @abstractmethod
    def render(self, records: Sequence[EnvironmentVariable], options: Any = None) -> str:
        """Serialize records into the target text format."""
        ...
