"""Universal renderer — dispatches to format-specific renderers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from appsettingsenv.models.options import FormatOptions, validate_format_options
from appsettingsenv.models.records import EnvironmentVariable

from .base import BaseRenderer
from .compose_renderer import ComposeRenderer
from .env_file_renderer import EnvFileRenderer
from .plain_text_renderer import PlainTextRenderer

RENDERERS: tuple[type[BaseRenderer], ...] = (ComposeRenderer, EnvFileRenderer, PlainTextRenderer)


class UnsupportedFormatError(Exception):
    """Raised when no renderer is registered for the requested output format."""

    def __init__(self, output_format: str) -> None:
        super().__init__(f"Unsupported output format: {output_format}")
        self.output_format = output_format


class UniversalRenderer:
    """Orchestrator: selects the renderer registered for an output format."""

    _REGISTRY: dict[str, type[BaseRenderer]] = {
        name: renderer_cls
        for renderer_cls in RENDERERS
        for name in (renderer_cls.format_name, *renderer_cls.aliases)
    }

    def supported_formats(self) -> list[str]:
        """Return the list of accepted output format selectors."""
        return list(self._REGISTRY.keys())

    def render(
        self,
        records: Sequence[EnvironmentVariable],
        output_format: str,
        format_options: FormatOptions | Mapping[str, Any] | None = None,
    ) -> str:
        """Render records, passing the option bag that belongs to the chosen format."""
        renderer_cls = self._REGISTRY.get(output_format)
        if renderer_cls is None:
            raise UnsupportedFormatError(output_format)
        opts = validate_format_options(format_options)
        return renderer_cls().render(records, getattr(opts, renderer_cls.options_field))


def render_records(
    records: Sequence[EnvironmentVariable],
    output_format: str,
    format_options: FormatOptions | Mapping[str, Any] | None = None,
) -> str:
    """Render records in ``output_format``; raises ``UnsupportedFormatError``."""
    return UniversalRenderer().render(records, output_format, format_options)


def estimate_output_sizes(records: Sequence[EnvironmentVariable]) -> dict[str, int]:
    """Return the length of the default-option output for each format."""
    return {renderer_cls.format_name: len(renderer_cls().render(records)) for renderer_cls in RENDERERS}
