"""Serialization of token values for JSON and stylesheet output."""

from __future__ import annotations

from typing import Any

from tokman.model.values import Color, Dimension, Shadow, TokenValue, Unresolved, format_number


def to_json_value(value: TokenValue) -> Any:
    """Return a JSON-serializable representation of *value*."""
    if isinstance(value, (Color, Shadow)):
        return value.to_dict()
    if isinstance(value, Dimension):
        return str(value)
    if isinstance(value, Unresolved):
        raise ValueError(f"Unresolved value for node {value.node_id} cannot be serialized")
    return value


def to_css_value(value: TokenValue) -> str:
    """Return *value* as CSS text."""
    if isinstance(value, (Color, Shadow)):
        return value.to_css()
    if isinstance(value, Dimension):
        return str(value)
    if isinstance(value, Unresolved):
        raise ValueError(f"Unresolved value for node {value.node_id} cannot be serialized")
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)
