"""Parsed Figma records consumed by the transformers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Mode:
    id: str
    name: str


@dataclass(frozen=True)
class VariableCollection:
    """A group of variables sharing an ordered mode list and a default mode."""

    id: str
    name: str
    modes: tuple[Mode, ...] = ()
    default_mode_id: str = ""

    @property
    def default_mode_name(self) -> str | None:
        for mode in self.modes:
            if mode.id == self.default_mode_id:
                return mode.name
        return None

    @property
    def mode_names(self) -> list[str]:
        return [mode.name for mode in self.modes]


@dataclass(frozen=True)
class FigmaVariable:
    """A variable with its per-mode values already normalized and keyed by mode name."""

    id: str
    name: str
    collection: VariableCollection | None
    resolved_type: str
    values_by_mode: dict[str, Any] = field(default_factory=dict, hash=False)
    description: str = ""
    scopes: tuple[str, ...] = ()
    code_syntax: dict[str, str] = field(default_factory=dict, hash=False)
    aliases: dict[str, str] = field(default_factory=dict, hash=False)
    # mode name -> diagnostic code for values that were dropped while parsing
    dropped: dict[str, str] = field(default_factory=dict, hash=False)
    raw_values: dict[str, Any] = field(default_factory=dict, hash=False, compare=False)


@dataclass(frozen=True)
class FigmaStyle:
    """A published style: a reference to the node that carries its values."""

    key: str
    node_id: str
    name: str
    style_type: str  # "FILL", "TEXT", "EFFECT", "GRID"
    description: str = ""
