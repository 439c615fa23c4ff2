"""Advisory checks over a finished list of environment-variable records."""

from __future__ import annotations

from collections.abc import Iterable

from appsettingsenv.converters.identifiers import is_valid_identifier
from appsettingsenv.models.records import EnvironmentVariable

MAX_NAME_LENGTH = 255
MAX_VALUE_LENGTH = 32767


def validate_environment_variable_names(records: Iterable[EnvironmentVariable]) -> list[str]:
    """Report duplicate, invalid or oversized names and oversized values."""
    warnings: list[str] = []
    seen: set[str] = set()
    for record in records:
        if record.key in seen:
            warnings.append(f"Duplicate environment variable key: {record.key}")
        seen.add(record.key)

        if not is_valid_identifier(record.key):
            warnings.append(f"Invalid environment variable name: {record.key}")
        if len(record.key) > MAX_NAME_LENGTH:
            warnings.append(f"Environment variable name too long ({len(record.key)} chars): {record.key}")
        if len(record.value) > MAX_VALUE_LENGTH:
            warnings.append(
                f"Environment variable value too long ({len(record.value)} chars) for key: {record.key}"
            )
    return warnings
