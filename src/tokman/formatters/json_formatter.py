"""Nested JSON output keyed by token path segments."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from tokman.formatters.values import to_json_value
from tokman.model.token import Token

log = logging.getLogger("tokman.formatters")

MODES_EXTENSION = "tokman.modes"


def _leaf(token: Token, include_modes: bool) -> dict[str, Any]:
    leaf: dict[str, Any] = {
        "$value": to_json_value(token.value),
        "$type": str(token.type),
    }
    if token.description:
        leaf["$description"] = token.description
    if include_modes and token.values_by_mode:
        leaf["$extensions"] = {
            MODES_EXTENSION: {
                mode: to_json_value(value) for mode, value in token.values_by_mode.items()
            }
        }
    return leaf


def _is_leaf(node: Any) -> bool:
    return isinstance(node, dict) and "$value" in node


def format_json(tokens: Sequence[Token], *, include_modes: bool = True) -> dict[str, Any]:
    """Build a tree keyed by successive path segments with one leaf per token.

    Placeholder tokens are skipped. When a token's path runs into an existing
    leaf (or its leaf position is an existing group), the later token wins.
    """
    root: dict[str, Any] = {}
    for token in tokens:
        if token.needs_node_data:
            continue
        current = root
        *groups, last = token.path
        for segment in groups:
            child = current.get(segment)
            if not isinstance(child, dict) or _is_leaf(child):
                if child is not None:
                    log.warning("Token group %r replaces an existing token leaf", segment)
                child = {}
                current[segment] = child
            current = child
        if last in current:
            log.warning("Token %r replaces an existing entry at %s", token.name, ".".join(token.path))
        current[last] = _leaf(token, include_modes)
    return root


def render_json(tokens: Sequence[Token], *, include_modes: bool = True, indent: int = 2) -> str:
    return json.dumps(format_json(tokens, include_modes=include_modes), indent=indent) + "\n"
