"""Parse raw text into a root JSON object with user-friendly syntax errors."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from appsettingsenv.models.records import ErrorType, ValidationResult

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Input is empty or contains only whitespace"
NON_OBJECT_ROOT_MESSAGE = "Root element must be a JSON object, not an array or primitive value"
INCOMPLETE_MESSAGE = "JSON is incomplete - missing closing brackets or quotes"
TOO_DEEP_MESSAGE = "JSON is nested too deeply to be processed"


class NonStandardConstantError(ValueError):
    """Raised for the NaN and Infinity literals, which JSON does not allow."""

    def __init__(self, constant: str) -> None:
        super().__init__(f"Non-standard JSON constant: {constant}")
        self.constant = constant


def _reject_constant(constant: str) -> Any:
    raise NonStandardConstantError(constant)


# Parser message pattern -> user-facing explanation; first match wins.
_ERROR_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"^Unterminated string"), INCOMPLETE_MESSAGE),
    (re.compile(r"^Expecting property name"), "Missing property name or closing bracket"),
    (re.compile(r"^Illegal trailing comma"), "Missing property name or closing bracket"),
    (re.compile(r"^Expecting ',' delimiter"), "Unexpected string value - check for missing commas or quotes"),
    (re.compile(r"^Expecting ':' delimiter"), "Missing colon after property name"),
    (re.compile(r"^Expecting value"), "Invalid JSON syntax - unexpected character"),
    (re.compile(r"^Extra data"), "Unexpected content after the root object"),
]


def validate_document(raw: str) -> ValidationResult:
    """Parse ``raw`` and require the root to be a JSON object."""
    if not raw or not raw.strip():
        return ValidationResult(
            is_valid=False,
            error=EMPTY_INPUT_MESSAGE,
            error_type=ErrorType.EMPTY_INPUT,
            line_number=1,
            column_number=1,
        )

    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except NonStandardConstantError as e:
        line, column = position_to_line_column(raw, find_outside_strings(raw, e.constant))
        return ValidationResult(
            is_valid=False,
            error=f"Invalid JSON syntax - {e.constant} is not a valid JSON value",
            error_type=ErrorType.INVALID_JSON,
            line_number=line,
            column_number=column,
        )
    except json.JSONDecodeError as e:
        line, column = position_to_line_column(raw, e.pos)
        logger.debug("JSON syntax error at line %d column %d: %s", line, column, e.msg)
        return ValidationResult(
            is_valid=False,
            error=sanitize_error_message(e.msg, at_end=e.pos >= len(raw.rstrip())),
            error_type=ErrorType.INVALID_JSON,
            line_number=line,
            column_number=column,
        )
    except RecursionError:
        return ValidationResult(
            is_valid=False,
            error=TOO_DEEP_MESSAGE,
            error_type=ErrorType.INVALID_JSON,
            line_number=1,
            column_number=1,
        )

    if not isinstance(data, dict):
        return ValidationResult(
            is_valid=False,
            error=NON_OBJECT_ROOT_MESSAGE,
            error_type=ErrorType.UNSUPPORTED_TYPE,
            line_number=1,
            column_number=1,
        )

    return ValidationResult(is_valid=True, data=data)


def position_to_line_column(text: str, offset: int) -> tuple[int, int]:
    """Convert a character offset into 1-based (line, column)."""
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    last_newline = text.rfind("\n", 0, offset)
    return line, offset - last_newline


def sanitize_error_message(message: str, at_end: bool = False) -> str:
    """Map a raw parser message onto a plain-English explanation."""
    if at_end:
        return INCOMPLETE_MESSAGE
    for pattern, replacement in _ERROR_PATTERNS:
        if pattern.search(message):
            return replacement
    return message


def find_outside_strings(text: str, token: str) -> int:
    """Return the offset of the first ``token`` not inside a JSON string, or 0."""
    in_string = False
    escaped = False
    for index, ch in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif text.startswith(token, index):
            return index
    return 0
