"""Parsers turning raw Figma API payloads into :mod:`tokman.figma.models` records."""

from __future__ import annotations

import logging
from typing import Any

from tokman.figma.errors import InvalidResponseError
from tokman.figma.models import FigmaStyle, FigmaVariable, Mode, VariableCollection
from tokman.normalize.color import normalize_color

__all__ = ["parse_variables_response", "parse_styles_response"]

log = logging.getLogger("tokman.figma")

_ALIAS_TYPE = "VARIABLE_ALIAS"


def _is_alias(value: Any) -> bool:
    return isinstance(value, dict) and value.get("type") == _ALIAS_TYPE


def _parse_collection(collection_id: str, raw: dict[str, Any]) -> VariableCollection:
    modes = tuple(
        Mode(id=str(m.get("modeId", "")), name=str(m.get("name", m.get("modeId", ""))))
        for m in raw.get("modes") or []
    )
    return VariableCollection(
        id=str(raw.get("id", collection_id)),
        name=str(raw.get("name", "")),
        modes=modes,
        default_mode_id=str(raw.get("defaultModeId", "")),
    )


class _AliasResolver:
    """Follow ``VARIABLE_ALIAS`` chains to a concrete raw value."""

    def __init__(
        self,
        variables: dict[str, dict[str, Any]],
        collections: dict[str, VariableCollection],
    ) -> None:
        self._variables = variables
        self._collections = collections

    def _mode_id_for(self, collection: VariableCollection | None, mode_name: str) -> str | None:
        if collection is None:
            return None
        for mode in collection.modes:
            if mode.name == mode_name:
                return mode.id
        return None

    def resolve(self, value: Any, mode_name: str) -> tuple[Any, str | None]:
        """Return ``(concrete_value, first_target_name)``; the value is ``None`` if unresolvable."""
        seen: set[str] = set()
        first_target: str | None = None
        while _is_alias(value):
            target_id = str(value.get("id", ""))
            if target_id in seen:
                log.debug("Alias cycle through variable %s", target_id)
                return None, first_target
            seen.add(target_id)
            target = self._variables.get(target_id)
            if target is None:
                return None, first_target
            if first_target is None:
                first_target = str(target.get("name", target_id))
            collection = self._collections.get(str(target.get("variableCollectionId", "")))
            values = target.get("valuesByMode") or {}
            mode_id = self._mode_id_for(collection, mode_name)
            if mode_id is None or mode_id not in values:
                mode_id = collection.default_mode_id if collection else None
            if mode_id is None or mode_id not in values:
                mode_id = next(iter(values), None)
            if mode_id is None:
                return None, first_target
            value = values[mode_id]
        return value, first_target


def parse_variables_response(payload: dict[str, Any]) -> list[FigmaVariable]:
    """Parse a ``/variables/local`` response into :class:`FigmaVariable` records.

    Per-mode values are keyed by mode name, ordered by the collection's mode
    list. COLOR values are normalized; values that fail normalization or
    whose alias cannot be resolved are dropped for that mode and recorded
    in ``dropped``. Variables whose collection is missing are kept with
    ``collection=None``.
    """
    meta = payload.get("meta") if isinstance(payload, dict) else None
    if (
        not isinstance(meta, dict)
        or not isinstance(meta.get("variables"), dict)
        or not isinstance(meta.get("variableCollections"), dict)
    ):
        raise InvalidResponseError("Invalid Figma variables data structure received")

    raw_variables: dict[str, dict[str, Any]] = meta["variables"]
    collections = {
        cid: _parse_collection(cid, raw) for cid, raw in meta["variableCollections"].items()
    }
    aliases = _AliasResolver(raw_variables, collections)

    parsed: list[FigmaVariable] = []
    for var_id, raw in raw_variables.items():
        collection = collections.get(str(raw.get("variableCollectionId", "")))
        mode_names = {m.id: m.name for m in collection.modes} if collection else {}
        resolved_type = str(raw.get("resolvedType", ""))
        raw_values: dict[str, Any] = raw.get("valuesByMode") or {}

        # Collection mode order first, then any mode ids the collection doesn't list.
        ordered_ids = [mid for mid in mode_names if mid in raw_values]
        ordered_ids += [mid for mid in raw_values if mid not in mode_names]

        values: dict[str, Any] = {}
        alias_names: dict[str, str] = {}
        dropped: dict[str, str] = {}
        for mode_id in ordered_ids:
            mode_name = mode_names.get(mode_id, mode_id)
            value = raw_values[mode_id]
            if _is_alias(value):
                value, target_name = aliases.resolve(value, mode_name)
                if target_name:
                    alias_names[mode_name] = target_name
                if value is None:
                    log.debug("Unresolvable alias in %s (%s)", raw.get("name"), mode_name)
                    dropped[mode_name] = "unresolved-alias"
                    continue
            if resolved_type == "COLOR":
                value = normalize_color(value)
                if value is None:
                    dropped[mode_name] = "invalid-color"
                    continue
            if value is None:
                continue
            values[mode_name] = value

        parsed.append(
            FigmaVariable(
                id=str(raw.get("id", var_id)),
                name=str(raw.get("name", "")),
                collection=collection,
                resolved_type=resolved_type,
                values_by_mode=values,
                description=raw.get("description") or "",
                scopes=tuple(raw.get("scopes") or ()),
                code_syntax=dict(raw.get("codeSyntax") or {}),
                aliases=alias_names,
                dropped=dropped,
                raw_values={mode_names.get(k, k): v for k, v in raw_values.items()},
            )
        )
    return parsed


def parse_styles_response(payload: dict[str, Any] | list[dict[str, Any]]) -> list[FigmaStyle]:
    """Parse a ``/styles`` response (or its ``meta.styles`` list) into :class:`FigmaStyle` records."""
    if isinstance(payload, dict):
        payload = (payload.get("meta") or {}).get("styles")
    if not isinstance(payload, list):
        raise InvalidResponseError("Invalid Figma styles data structure received")

    styles: list[FigmaStyle] = []
    for raw in payload:
        if not isinstance(raw, dict):
            continue
        node_id = str(raw.get("node_id", ""))
        styles.append(
            FigmaStyle(
                key=str(raw.get("key") or node_id),
                node_id=node_id,
                name=str(raw.get("name", "")),
                style_type=str(raw.get("style_type", "")),
                description=raw.get("description") or "",
            )
        )
    return styles
