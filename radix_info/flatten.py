#!/usr/bin/env python3
"""
JSON Flattening
Turns nested node status documents into flat metric-name mappings
"""

import json
import logging
from typing import Any, Dict, Iterable

from .exceptions import FlattenError, MalformedInputError, NameCollisionError

logger = logging.getLogger(__name__)

SEPARATOR = "_"


def _reject_constant(literal: str):
    raise ValueError(f"non-standard JSON constant {literal}")


def load_json(payload: bytes, source: str = "payload") -> Any:
    """Decode a JSON payload, raising MalformedInputError on bad input or NaN/Infinity literals"""
    try:
        return json.loads(payload, parse_constant=_reject_constant)
    except (ValueError, TypeError) as e:
        raise MalformedInputError(source, str(e)) from e


def flatten_json(document: Any, prefix: str = "") -> Dict[str, Any]:
    """
    Flatten a JSON object or array into {name: scalar}.

    Top-level keys are appended straight onto the prefix, deeper keys are
    joined with an underscore. Array elements use their index as the key.
    Empty containers produce no entries. Two paths that join to the same
    name raise NameCollisionError.

    Args:
        document: Parsed JSON object or array
        prefix: Root prefix for every name, e.g. "radix_"

    Returns:
        Mapping of flattened name to leaf value
    """
    if not isinstance(document, (dict, list)):
        raise FlattenError(
            f"Cannot flatten {type(document).__name__}, expected object or array"
        )

    flat: Dict[str, Any] = {}
    _flatten_into(flat, document, prefix, top=True)
    return flat


def _flatten_into(flat: Dict[str, Any], node: Any, prefix: str, top: bool) -> None:
    if isinstance(node, dict):
        items = node.items()
    else:
        items = ((str(index), value) for index, value in enumerate(node))

    for key, value in items:
        name = prefix + key if top else prefix + SEPARATOR + key
        if isinstance(value, (dict, list)):
            _flatten_into(flat, value, name, top=False)
        elif name in flat:
            raise NameCollisionError(name)
        else:
            flat[name] = value


def filter_keys(flat: Dict[str, Any], denylist: Iterable[str]) -> Dict[str, Any]:
    """Return a copy of flat without the denylisted names"""
    denied = set(denylist)
    filtered = {name: value for name, value in flat.items() if name not in denied}

    removed = len(flat) - len(filtered)
    if removed:
        logger.debug(f"Filtered {removed} denylisted keys")
    return filtered
