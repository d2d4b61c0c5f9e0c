"""Helpers for reading component data and entity references from scene documents."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

REF_PREFIX = "ref."
DATA_KEY = "Data"


def component_data(component_node: Mapping[str, Any]) -> Any:
    """Return the ``Data`` entry of a component node.

    Raises KeyError if the node has no ``Data`` entry.
    """
    if DATA_KEY not in component_node:
        raise KeyError(f"Component node has no {DATA_KEY!r} entry")
    return component_node[DATA_KEY]


def is_reference(value: str) -> bool:
    """Tell whether a string is an entity reference (``ref.EntityName``)."""
    return value.startswith(REF_PREFIX)


def reference_substring(ref_str: str) -> str:
    """Extract the entity name from a reference string (``ref.EntityName``)."""
    if len(ref_str) < len(REF_PREFIX):
        raise ValueError(f"Reference string is too short: {ref_str!r}")
    return ref_str[len(REF_PREFIX):]