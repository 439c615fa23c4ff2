"""Flattening of nested documents into environment-variable records."""

from .complexity import analyze_complexity
from .flattener import flatten_to_records, stringify_value, transform_key_name
from .identifiers import is_valid_identifier, sanitize_identifier, sanitize_key

__all__ = [
    "analyze_complexity",
    "flatten_to_records",
    "is_valid_identifier",
    "sanitize_identifier",
    "sanitize_key",
    "stringify_value",
    "transform_key_name",
]
