#!/usr/bin/env python3
"""
Utility Functions
Numeric coercion, path projection and aggregation helpers shared by the extractors
"""

import math
from typing import Any, Sequence, Tuple

from .exceptions import EmptyAggregationError, ProjectionError


def is_number(value: Any) -> bool:
    """True for JSON numbers; booleans are not numbers"""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_float(value: Any, path: str) -> float:
    """Coerce a JSON number or numeric string to float"""
    if is_number(value) or isinstance(value, str):
        try:
            number = float(value)
        except (ValueError, OverflowError):
            number = None
        if number is not None and math.isfinite(number):
            return number
    raise ProjectionError(path, f"expected a number, got {value!r}")


def project(document: Any, path: str) -> Any:
    """Follow a dotted path through nested objects"""
    node = document
    walked = []
    for segment in path.split("."):
        walked.append(segment)
        if not isinstance(node, dict):
            raise ProjectionError(".".join(walked), "parent is not an object")
        if segment not in node:
            raise ProjectionError(".".join(walked), "field is missing")
        node = node[segment]
    return node


def project_array(document: Any, path: str) -> list:
    """Project a path that must resolve to a JSON array"""
    value = project(document, path)
    if not isinstance(value, list):
        raise ProjectionError(path, f"expected an array, got {type(value).__name__}")
    return value


def min_max(values: Sequence[float]) -> Tuple[float, float]:
    """Minimum and maximum of a non-empty sequence in one pass"""
    if not values:
        raise EmptyAggregationError("Cannot aggregate an empty sequence")

    low = high = values[0]
    for value in values:
        if value < low:
            low = value
        if value > high:
            high = value
    return low, high
