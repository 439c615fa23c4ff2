"""Identifier predicates and transforms shared by the flattener and validators."""

from __future__ import annotations

import re

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NON_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_]")
_VALID_FIRST_CHAR = re.compile(r"^[A-Za-z_]")


def is_valid_identifier(name: str) -> bool:
    """Return True if ``name`` can be used as an environment variable name."""
    return bool(IDENTIFIER_PATTERN.fullmatch(name))


def sanitize_identifier(name: str) -> str:
    """Replace non-identifier characters with ``_`` and fix a leading digit."""
    sanitized = _NON_IDENTIFIER_CHARS.sub("_", name)
    if not _VALID_FIRST_CHAR.match(sanitized):
        sanitized = f"_{sanitized}"
    return sanitized


def sanitize_key(key: str, warnings: list[str]) -> str:
    """Sanitize one mapping key, appending a warning for every rewrite made.

    Dots become ``__`` (the .NET section delimiter), remaining special
    characters become ``_`` and a key not starting with a letter or
    underscore is prefixed with ``_``.
    """
    sanitized = key

    if "." in sanitized:
        sanitized = sanitized.replace(".", "__")
        warnings.append(f'Replaced dots in key "{key}" with double underscores')

    replaced = _NON_IDENTIFIER_CHARS.sub("_", sanitized)
    if replaced != sanitized:
        warnings.append(f'Replaced special characters in key "{key}" with underscores')
    sanitized = replaced

    if not _VALID_FIRST_CHAR.match(sanitized):
        sanitized = f"_{sanitized}"
        warnings.append(f'Prefixed key "{key}" with underscore to ensure valid identifier')

    return sanitized
