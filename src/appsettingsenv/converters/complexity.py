"""Document complexity statistics and recommendations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from appsettingsenv.models.records import ComplexityStats

MAX_RECOMMENDED_KEYS = 100
MAX_RECOMMENDED_DEPTH = 6
MAX_RECOMMENDED_ARRAYS = 10


def analyze_complexity(data: Mapping[str, Any]) -> ComplexityStats:
    """Count keys, nesting depth and arrays, and derive advisory recommendations."""
    counts = {"total_keys": 0, "max_depth": 0, "array_count": 0}
    _walk(data, 1, counts)

    recommendations: list[str] = []
    if counts["total_keys"] > MAX_RECOMMENDED_KEYS:
        recommendations.append("Large configuration detected - consider splitting into multiple files")
    if counts["max_depth"] > MAX_RECOMMENDED_DEPTH:
        recommendations.append("Deep nesting detected - consider flattening configuration structure")
    if counts["array_count"] > MAX_RECOMMENDED_ARRAYS:
        recommendations.append("Many arrays detected - ensure array handling matches your deployment needs")

    return ComplexityStats(recommendations=recommendations, **counts)


def _walk(value: Any, depth: int, counts: dict[str, int]) -> None:
    counts["max_depth"] = max(counts["max_depth"], depth)
    if isinstance(value, Mapping):
        counts["total_keys"] += len(value)
        for child in value.values():
            _walk(child, depth + 1, counts)
    elif isinstance(value, list):
        counts["array_count"] += 1
        for child in value:
            _walk(child, depth + 1, counts)
