"""Data models for documents, environment-variable records and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Literal

JsonObject = dict[str, Any]

OriginalType = Literal["string", "number", "boolean", "null", "object", "array"]


class ErrorType(str, Enum):
    """Kinds of failures reported by the conversion pipeline."""

    INVALID_JSON = "INVALID_JSON"
    EMPTY_INPUT = "EMPTY_INPUT"
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    CONVERSION_FAILED = "CONVERSION_FAILED"
    FORMAT_ERROR = "FORMAT_ERROR"


@dataclass(frozen=True)
class ProcessingError:
    """Structured error information."""

    type: ErrorType
    message: str
    details: str | None = None
    line_number: int | None = None
    column_number: int | None = None


@dataclass(frozen=True)
class EnvironmentVariable:
    """A single flattened environment-variable entry with its provenance."""

    key: str
    value: str
    original_path: str
    original_type: OriginalType
    is_array_element: bool = False
    array_index: int | None = None


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of parsing raw text into a root JSON object."""

    is_valid: bool
    data: JsonObject | None = None
    error: str | None = None
    error_type: ErrorType | None = None
    line_number: int | None = None
    column_number: int | None = None


@dataclass(frozen=True)
class InspectionResult:
    """Advisory findings about a parsed document."""

    is_valid: bool
    warnings: list[str] = field(default_factory=list)
    errors: list[ProcessingError] = field(default_factory=list)


@dataclass(frozen=True)
class FlattenResult:
    """Records produced by flattening a document."""

    success: bool
    records: list[EnvironmentVariable] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error: ProcessingError | None = None


@dataclass(frozen=True)
class ComplexityStats:
    """Size and shape statistics of a document."""

    total_keys: int
    max_depth: int
    array_count: int
    recommendations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ConversionServiceResult:
    """Final result of a complete text-to-output conversion."""

    success: bool
    output: str | None = None
    records: list[EnvironmentVariable] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error: ProcessingError | None = None
    stats: ComplexityStats | None = None
