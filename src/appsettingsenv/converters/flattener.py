"""Flatten a nested appsettings document into ordered environment-variable records."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from appsettingsenv.models.options import ConversionOptions, validate_conversion_options
from appsettingsenv.models.records import (
    EnvironmentVariable,
    ErrorType,
    FlattenResult,
    OriginalType,
    ProcessingError,
)

from .identifiers import sanitize_key

logger = logging.getLogger(__name__)

OBJECT_PLACEHOLDER = "[object Object]"


def flatten_to_records(
    data: Mapping[str, Any],
    options: ConversionOptions | Mapping[str, Any] | None = None,
) -> FlattenResult:
    """Convert a root JSON object into environment-variable records.

    Records follow the depth-first, insertion-ordered traversal of ``data``.
    Unexpected failures are reported as a ``CONVERSION_FAILED`` result.
    """
    opts = validate_conversion_options(options)
    warnings: list[str] = []
    try:
        records = _flatten_mapping(data, "", "", opts, warnings)
    except Exception as e:
        logger.warning("Flattening failed: %s", e)
        return FlattenResult(
            success=False,
            warnings=warnings,
            error=ProcessingError(
                type=ErrorType.CONVERSION_FAILED,
                message="Failed to convert JSON to environment variables",
                details=str(e) or type(e).__name__,
            ),
        )
    logger.debug("Flattened document into %d record(s)", len(records))
    return FlattenResult(success=True, records=records, warnings=warnings)


def _flatten(
    value: Any, key: str, path: str, opts: ConversionOptions, warnings: list[str]
) -> list[EnvironmentVariable]:
    if value is None:
        return _null_records(key, path, opts)
    if isinstance(value, Mapping):
        return _flatten_mapping(value, key, path, opts, warnings)
    if isinstance(value, list):
        return _flatten_array(value, key, path, opts, warnings)
    return [_create_record(key, value, path, original_type_of(value), opts)]


def _flatten_mapping(
    obj: Mapping[str, Any], key: str, path: str, opts: ConversionOptions, warnings: list[str]
) -> list[EnvironmentVariable]:
    items: list[EnvironmentVariable] = []
    for k, v in obj.items():
        clean = sanitize_key(str(k), warnings)
        child_key = f"{key}{opts.key_separator}{clean}" if key else clean
        child_path = f"{path}.{k}" if path else str(k)
        items.extend(_flatten(v, child_key, child_path, opts, warnings))
    return items


def _flatten_array(
    arr: list[Any], key: str, path: str, opts: ConversionOptions, warnings: list[str]
) -> list[EnvironmentVariable]:
    if not arr:
        warnings.append(f"Empty array found at path: {path}")
        return []

    if not opts.include_array_indices:
        # Lossy: nested containers collapse to a fixed placeholder.
        parts: list[str] = []
        for item in arr:
            if isinstance(item, (Mapping, list)):
                warnings.append(f"Complex object in array at {path} - converted to {OBJECT_PLACEHOLDER}")
                parts.append(OBJECT_PLACEHOLDER)
            elif item is None:
                parts.append("null")
            else:
                parts.append(stringify_value(item))
        return [_create_record(key, ",".join(parts), path, "array", opts)]

    items: list[EnvironmentVariable] = []
    for index, item in enumerate(arr):
        item_key = f"{key}{opts.key_separator}{index}"
        item_path = f"{path}[{index}]"
        if isinstance(item, (Mapping, list)):
            items.extend(_flatten(item, item_key, item_path, opts, warnings))
        elif item is None:
            items.extend(_null_records(item_key, item_path, opts, array_index=index))
        else:
            items.append(_create_record(item_key, item, item_path, original_type_of(item), opts, index))
    return items


def _null_records(
    key: str, path: str, opts: ConversionOptions, array_index: int | None = None
) -> list[EnvironmentVariable]:
    if opts.null_handling == "omit":
        return []
    value = "null" if opts.null_handling == "null" else ""
    return [_create_record(key, value, path, "null", opts, array_index)]


def _create_record(
    key: str,
    value: Any,
    path: str,
    original_type: OriginalType,
    opts: ConversionOptions,
    array_index: int | None = None,
) -> EnvironmentVariable:
    return EnvironmentVariable(
        key=f"{opts.prefix}{transform_key_name(key, opts)}",
        value=stringify_value(value),
        original_path=path,
        original_type=original_type,
        is_array_element=array_index is not None,
        array_index=array_index,
    )


def transform_key_name(key: str, options: ConversionOptions) -> str:
    """Apply the configured naming convention to a key."""
    if options.naming_convention == "uppercase":
        return key.upper()
    if options.naming_convention == "lowercase":
        return key.lower()
    return key


def original_type_of(value: Any) -> OriginalType:
    """Return the JSON type name of a parsed value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list):
        return "array"
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def stringify_value(value: Any) -> str:
    """Serialize a JSON value to the string stored in a record."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def format_float(value: float) -> str:
    """Format a float in canonical decimal form (``1.5``, ``3``, ``1e-7``, ``1e+21``).

    Uses the shortest round-tripping digits; plain notation between 1e-7 and
    1e21, exponent notation outside that range.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    n = exponent + k  # position of the decimal point relative to the digits
    prefix = "-" if sign else ""

    if k <= n <= 21:
        return f"{prefix}{digits}{'0' * (n - k)}"
    if 0 < n <= 21:
        return f"{prefix}{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return f"{prefix}0.{'0' * -n}{digits}"

    mantissa = digits[0] + (f".{digits[1:]}" if k > 1 else "")
    e = n - 1
    return f"{prefix}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
