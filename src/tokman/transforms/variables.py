"""Variable transformer: Figma variables with per-mode values become tokens."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from tokman.figma.models import FigmaVariable
from tokman.model.token import Token, TokenMetadata, TokenSource
from tokman.normalize.naming import DEFAULT_SEPARATOR, derive_slash_name
from tokman.normalize.types import map_figma_type
from tokman.transforms.base import TransformResult

log = logging.getLogger("tokman.transforms")

_SOURCE = TokenSource.FIGMA


def select_default_mode(variable: FigmaVariable) -> str | None:
    """Pick the mode whose value becomes the token's default value.

    The collection's default mode wins when the variable has a value for it;
    otherwise the first mode in the collection's ordered mode list that has a
    value; otherwise the first mode present in the variable itself.
    """
    values = variable.values_by_mode
    if not values:
        return None
    collection = variable.collection
    if collection is not None:
        default_name = collection.default_mode_name
        if default_name is not None and default_name in values:
            return default_name
        for name in collection.mode_names:
            if name in values:
                return name
    return next(iter(values))


def _ordered_values(variable: FigmaVariable) -> dict[str, Any]:
    values = variable.values_by_mode
    ordered: dict[str, Any] = {}
    if variable.collection is not None:
        for name in variable.collection.mode_names:
            if name in values:
                ordered[name] = values[name]
    for name, value in values.items():
        ordered.setdefault(name, value)
    return ordered


class VariableTransformer:
    """Turn parsed :class:`FigmaVariable` records into tokens.

    Records without a collection, without a usable name, or without any mode
    value are skipped and reported as diagnostics.
    """

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        self.separator = separator

    def transform(self, records: Sequence[FigmaVariable]) -> TransformResult:
        result = TransformResult()
        for variable in records:
            token = self._transform_one(variable, result)
            if token is not None:
                result.tokens.append(token)
        log.info(
            "Transformed %d of %d variables into tokens", len(result.tokens), len(records)
        )
        return result

    def _transform_one(self, variable: FigmaVariable, result: TransformResult) -> Token | None:
        if variable.collection is None:
            result.skip(
                "missing-collection",
                "variable has no collection reference",
                variable.name or variable.id,
                _SOURCE,
            )
            return None

        name, path = derive_slash_name(variable.name, self.separator)
        if not name:
            result.skip("empty-name", "variable name is empty", variable.id, _SOURCE)
            return None

        for mode, code in variable.dropped.items():
            reason = "alias could not be resolved" if code == "unresolved-alias" else "invalid color"
            result.skip(code, f"{reason} in mode {mode!r}", variable.name, _SOURCE)

        default_mode = select_default_mode(variable)
        if default_mode is None:
            result.skip("no-modes", "variable has no usable mode values", variable.name, _SOURCE)
            log.debug("Skipping variable %s: no mode values", variable.name)
            return None

        values = _ordered_values(variable)
        collection = variable.collection
        return Token(
            name=name,
            path=path,
            value=values[default_mode],
            type=map_figma_type(variable.resolved_type),
            description=variable.description,
            values_by_mode=values,
            metadata=TokenMetadata(
                source=_SOURCE,
                original_name=variable.name,
                original_value=variable.raw_values.get(default_mode, values[default_mode]),
                details={
                    "id": variable.id,
                    "scopes": list(variable.scopes),
                    "codeSyntax": dict(variable.code_syntax),
                    "collection": {"id": collection.id, "name": collection.name},
                    "defaultMode": default_mode,
                    "aliases": dict(variable.aliases),
                },
            ),
        )
