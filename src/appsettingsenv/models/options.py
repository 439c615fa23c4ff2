"""Conversion and output-format option models."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_KEY_SEPARATOR = "__"

NamingConvention = Literal["preserve", "uppercase", "lowercase"]
NullHandling = Literal["empty", "omit", "null"]
OutputFormat = Literal["docker-compose", "compose", "env-file", "plain-text"]

_NON_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_]")


class ConversionOptions(BaseModel):
    """Options controlling how a document is flattened into records."""

    model_config = ConfigDict(frozen=True)

    prefix: str = ""
    naming_convention: NamingConvention = "preserve"
    include_type_hints: bool = False
    key_separator: str = Field(default=DEFAULT_KEY_SEPARATOR, pattern=r"^[A-Za-z0-9_]+$")
    null_handling: NullHandling = "empty"
    include_array_indices: bool = True

    @field_validator("key_separator", mode="before")
    @classmethod
    def _default_empty_separator(cls, value: Any) -> Any:
        if value is None or value == "":
            return DEFAULT_KEY_SEPARATOR
        return value

    @field_validator("prefix", mode="before")
    @classmethod
    def _sanitize_prefix(cls, value: Any) -> Any:
        if value is None:
            return ""
        if not isinstance(value, str) or not value:
            return value
        prefix = _NON_IDENTIFIER_CHARS.sub("_", value)
        if not prefix.endswith("_"):
            prefix += "_"
        if not re.match(r"[A-Za-z_]", prefix):
            prefix = f"_{prefix}"
        return prefix


class ComposeOptions(BaseModel):
    """Docker Compose renderer options."""

    model_config = ConfigDict(frozen=True)

    use_array_format: bool = True
    indent_level: int = Field(default=2, ge=0)
    include_type_hints: bool = False


class EnvFileOptions(BaseModel):
    """.env renderer options."""

    model_config = ConfigDict(frozen=True)

    include_comments: bool = True
    quote_values: bool = True
    key_separator: str = Field(default=DEFAULT_KEY_SEPARATOR, min_length=1)


class PlainTextOptions(BaseModel):
    """Plain-text (shell) renderer options."""

    model_config = ConfigDict(frozen=True)

    separator: str = "="
    include_export: bool = False
    include_type_hints: bool = False


class FormatOptions(BaseModel):
    """Per-renderer option bags, one per output format."""

    model_config = ConfigDict(frozen=True)

    docker_compose: ComposeOptions = Field(default_factory=ComposeOptions)
    env_file: EnvFileOptions = Field(default_factory=EnvFileOptions)
    plain_text: PlainTextOptions = Field(default_factory=PlainTextOptions)


DEFAULT_CONVERSION_OPTIONS = ConversionOptions()
DEFAULT_FORMAT_OPTIONS = FormatOptions()


def validate_conversion_options(
    options: ConversionOptions | Mapping[str, Any] | None = None,
) -> ConversionOptions:
    """Fill in defaults and normalise a (partial) set of conversion options.

    Accepts an existing model, a mapping holding any subset of the fields, or
    ``None``. Applying it to its own result returns an equal model.
    """
    if options is None:
        return DEFAULT_CONVERSION_OPTIONS
    if isinstance(options, ConversionOptions):
        return ConversionOptions.model_validate(options.model_dump())
    return ConversionOptions.model_validate(dict(options))


def validate_format_options(options: FormatOptions | Mapping[str, Any] | None = None) -> FormatOptions:
    """Merge a (partial) mapping of per-format options over the defaults."""
    if options is None:
        return DEFAULT_FORMAT_OPTIONS
    if isinstance(options, FormatOptions):
        return options
    return FormatOptions.model_validate(dict(options))
