"""Heuristic, non-fatal checks for appsettings documents."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from appsettingsenv.converters.identifiers import is_valid_identifier
from appsettingsenv.models.records import ErrorType, InspectionResult, ProcessingError

logger = logging.getLogger(__name__)

DEFAULT_ALLOWED_ROOT_ARRAYS = frozenset({"AllowedHosts"})
MAX_NESTING_DEPTH = 10


def inspect_document(
    data: Mapping[str, Any],
    *,
    allowed_root_arrays: Iterable[str] = DEFAULT_ALLOWED_ROOT_ARRAYS,
) -> InspectionResult:
    """Collect warnings about patterns likely to cause trouble downstream.

    Never rejects the document; an unexpected internal failure is returned as
    a ``CONVERSION_FAILED`` error instead of being raised.
    """
    warnings: list[str] = []
    try:
        _check_common_sections(data, frozenset(allowed_root_arrays), warnings)
        _check_structure(data, "", 0, warnings)
    except Exception as e:
        logger.warning("Document inspection failed: %s", e)
        error = ProcessingError(
            type=ErrorType.CONVERSION_FAILED,
            message="Failed to parse appsettings structure",
            details=str(e) or type(e).__name__,
        )
        return InspectionResult(is_valid=False, warnings=warnings, errors=[error])
    return InspectionResult(is_valid=True, warnings=warnings)


def _check_common_sections(data: Mapping[str, Any], allowed_root_arrays: frozenset[str], warnings: list[str]) -> None:
    connection_strings = data.get("ConnectionStrings")
    if isinstance(connection_strings, Mapping):
        for key, value in connection_strings.items():
            if not isinstance(value, str):
                warnings.append(f'ConnectionString "{key}" is not a string value')
            elif not value:
                warnings.append(f'ConnectionString "{key}" is empty')

    logging_section = data.get("Logging")
    if isinstance(logging_section, Mapping):
        log_level = logging_section.get("LogLevel")
        if isinstance(log_level, Mapping):
            for key, value in log_level.items():
                if not isinstance(value, str):
                    warnings.append(f'LogLevel "{key}" should be a string value')

    for key, value in data.items():
        if isinstance(value, list) and key not in allowed_root_arrays:
            warnings.append(f'Array found at root level: "{key}" - ensure this is intentional')


def _check_structure(value: Any, path: str, depth: int, warnings: list[str]) -> None:
    if depth == MAX_NESTING_DEPTH + 1:
        warnings.append(f'Very deep nesting detected at "{path}" - consider flattening structure')

    if isinstance(value, Mapping):
        for key, child in value.items():
            key = str(key)
            if "__" in key:
                warnings.append(
                    f'Key "{key}" contains double underscores - may cause conflicts with converted output'
                )
            if "." in key:
                warnings.append(f'Key "{key}" contains dots - will be converted to double underscores')
            if not is_valid_identifier(key):
                warnings.append(
                    f'Key "{key}" contains special characters - ensure compatibility with your environment'
                )
            _check_structure(child, f"{path}.{key}" if path else key, depth + 1, warnings)
    elif isinstance(value, list):
        for index, child in enumerate(value):
            _check_structure(child, f"{path}[{index}]", depth + 1, warnings)


def get_nested_value(data: Mapping[str, Any], path: str) -> Any:
    """Look up a dot-separated path such as ``Logging.LogLevel.Default``.

    Returns ``None`` when any segment is missing or not an object.
    """
    current: Any = data
    for segment in path.split("."):
        if not isinstance(current, Mapping):
            return None
        current = current.get(segment)
    return current


def is_primitive_value(value: Any) -> bool:
    """Return True for strings, numbers, booleans and null."""
    return value is None or isinstance(value, (str, int, float, bool))
