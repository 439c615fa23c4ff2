"""Input validation and advisory document checks."""

from .document_validator import validate_document
from .inspector import DEFAULT_ALLOWED_ROOT_ARRAYS, get_nested_value, inspect_document, is_primitive_value
from .names import validate_environment_variable_names

__all__ = [
    "DEFAULT_ALLOWED_ROOT_ARRAYS",
    "get_nested_value",
    "inspect_document",
    "is_primitive_value",
    "validate_document",
    "validate_environment_variable_names",
]
