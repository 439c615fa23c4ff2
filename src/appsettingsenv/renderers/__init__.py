"""Output renderers for flattened environment-variable records."""

from .base import BaseRenderer
from .compose_renderer import ComposeRenderer, escape_yaml_value, needs_yaml_quoting
from .env_file_renderer import EnvFileRenderer, escape_env_value, needs_env_quoting
from .plain_text_renderer import PlainTextRenderer, escape_shell_value, needs_shell_quoting
from .universal_renderer import UniversalRenderer, UnsupportedFormatError, estimate_output_sizes, render_records

__all__ = [
    "BaseRenderer",
    "ComposeRenderer",
    "EnvFileRenderer",
    "PlainTextRenderer",
    "UniversalRenderer",
    "UnsupportedFormatError",
    "escape_env_value",
    "escape_shell_value",
    "escape_yaml_value",
    "estimate_output_sizes",
    "needs_env_quoting",
    "needs_shell_quoting",
    "needs_yaml_quoting",
    "render_records",
]
