"""Conversion service — validate, inspect, flatten and render in one call."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from appsettingsenv.converters.complexity import analyze_complexity
from appsettingsenv.converters.flattener import flatten_to_records
from appsettingsenv.models.options import (
    ConversionOptions,
    FormatOptions,
    validate_conversion_options,
    validate_format_options,
)
from appsettingsenv.models.records import ConversionServiceResult, ErrorType, ProcessingError
from appsettingsenv.renderers.universal_renderer import UnsupportedFormatError, render_records
from appsettingsenv.validation.document_validator import validate_document
from appsettingsenv.validation.inspector import DEFAULT_ALLOWED_ROOT_ARRAYS, inspect_document
from appsettingsenv.validation.names import validate_environment_variable_names

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentCheckResult:
    """Result of a validation-only pass over raw input."""

    is_valid: bool
    warnings: list[str] = field(default_factory=list)
    error: str | None = None
    line_number: int | None = None
    column_number: int | None = None


def convert(
    raw: str,
    output_format: str,
    conversion_options: ConversionOptions | Mapping[str, Any] | None = None,
    format_options: FormatOptions | Mapping[str, Any] | None = None,
) -> ConversionServiceResult:
    """Run the complete pipeline over raw JSON text.

    Never raises for bad input: every failure is reported through
    ``ConversionServiceResult.error``.
    """
    warnings: list[str] = []
    try:
        return _convert(raw, output_format, conversion_options, format_options, warnings)
    except ValidationError as e:
        logger.warning("Invalid options: %s", e)
        return _failure(ErrorType.CONVERSION_FAILED, "Invalid conversion options", warnings, details=str(e))
    except Exception as e:
        logger.warning("Unexpected error during conversion: %s", e)
        return _failure(
            ErrorType.CONVERSION_FAILED,
            "Unexpected error during conversion",
            warnings,
            details=str(e) or type(e).__name__,
        )


def _convert(
    raw: str,
    output_format: str,
    conversion_options: ConversionOptions | Mapping[str, Any] | None,
    format_options: FormatOptions | Mapping[str, Any] | None,
    warnings: list[str],
) -> ConversionServiceResult:
    validation = validate_document(raw)
    if not validation.is_valid or validation.data is None:
        return ConversionServiceResult(
            success=False,
            error=ProcessingError(
                type=validation.error_type or ErrorType.INVALID_JSON,
                message=validation.error or "JSON validation failed",
                line_number=validation.line_number,
                column_number=validation.column_number,
            ),
        )
    data = validation.data

    inspection = inspect_document(data)
    warnings.extend(inspection.warnings)
    if not inspection.is_valid:
        return _failure(
            ErrorType.CONVERSION_FAILED,
            "AppSettings structure validation failed",
            warnings,
            details="; ".join(e.message for e in inspection.errors),
        )

    conv_opts = validate_conversion_options(conversion_options)
    flattened = flatten_to_records(data, conv_opts)
    warnings.extend(flattened.warnings)
    if not flattened.success:
        return ConversionServiceResult(success=False, warnings=list(warnings), error=flattened.error)

    fmt_opts = validate_format_options(format_options)
    if conv_opts.include_type_hints:
        fmt_opts = fmt_opts.model_copy(
            update={
                "docker_compose": fmt_opts.docker_compose.model_copy(update={"include_type_hints": True}),
                "plain_text": fmt_opts.plain_text.model_copy(update={"include_type_hints": True}),
            }
        )
    if fmt_opts.env_file.key_separator != conv_opts.key_separator:
        fmt_opts = fmt_opts.model_copy(
            update={"env_file": fmt_opts.env_file.model_copy(update={"key_separator": conv_opts.key_separator})}
        )

    try:
        output = render_records(flattened.records, output_format, fmt_opts)
    except UnsupportedFormatError as e:
        return _failure(ErrorType.FORMAT_ERROR, str(e), warnings)

    warnings.extend(validate_environment_variable_names(flattened.records))
    stats = analyze_complexity(data)
    logger.debug(
        "Converted %d record(s) to %s with %d warning(s)", len(flattened.records), output_format, len(warnings)
    )
    return ConversionServiceResult(
        success=True,
        output=output,
        records=flattened.records,
        warnings=list(warnings),
        stats=stats,
    )


def _failure(
    error_type: ErrorType, message: str, warnings: list[str], details: str | None = None
) -> ConversionServiceResult:
    return ConversionServiceResult(
        success=False,
        warnings=list(warnings),
        error=ProcessingError(type=error_type, message=message, details=details),
    )


def convert_to_docker_compose(
    raw: str,
    conversion_options: ConversionOptions | Mapping[str, Any] | None = None,
    *,
    use_array_format: bool = True,
    indent_level: int = 2,
) -> ConversionServiceResult:
    """Convert raw JSON to a Docker Compose ``environment:`` block."""
    return convert(
        raw,
        "docker-compose",
        conversion_options,
        {"docker_compose": {"use_array_format": use_array_format, "indent_level": indent_level}},
    )


def convert_to_env_file(
    raw: str,
    conversion_options: ConversionOptions | Mapping[str, Any] | None = None,
    *,
    include_comments: bool = True,
    quote_values: bool = True,
) -> ConversionServiceResult:
    """Convert raw JSON to ``.env`` file content."""
    return convert(
        raw,
        "env-file",
        conversion_options,
        {"env_file": {"include_comments": include_comments, "quote_values": quote_values}},
    )


def convert_to_plain_text(
    raw: str,
    conversion_options: ConversionOptions | Mapping[str, Any] | None = None,
    *,
    include_export: bool = False,
    separator: str = "=",
) -> ConversionServiceResult:
    """Convert raw JSON to shell-style ``KEY=value`` lines."""
    return convert(
        raw,
        "plain-text",
        conversion_options,
        {"plain_text": {"include_export": include_export, "separator": separator}},
    )


def validate_appsettings_json(
    raw: str, allowed_root_arrays: Iterable[str] = DEFAULT_ALLOWED_ROOT_ARRAYS
) -> DocumentCheckResult:
    """Check raw text without converting it."""
    validation = validate_document(raw)
    if not validation.is_valid or validation.data is None:
        return DocumentCheckResult(
            is_valid=False,
            error=validation.error,
            line_number=validation.line_number,
            column_number=validation.column_number,
        )
    inspection = inspect_document(validation.data, allowed_root_arrays=allowed_root_arrays)
    return DocumentCheckResult(
        is_valid=inspection.is_valid,
        warnings=inspection.warnings,
        error="; ".join(e.message for e in inspection.errors) or None,
    )
