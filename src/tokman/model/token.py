"""Core token model: Token, TokenType, TokenSource and TokenMetadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from tokman.model.values import TokenValue, Unresolved


class TokenType(StrEnum):
    """Canonical token type categories."""

    COLOR = "color"
    DIMENSION = "dimension"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    SHADOW = "shadow"
    TYPOGRAPHY = "typography"  # only used by unresolved text-style placeholders


class TokenSource(StrEnum):
    """The kind of source a token was extracted from."""

    FIGMA = "figma"
    FIGMA_STYLE = "figma-style"
    STYLESHEET = "stylesheet"


@dataclass(frozen=True)
class TokenMetadata:
    """Provenance of a token.

    Attributes:
        source: Which kind of source produced the token.
        original_name: The untransformed source identifier.
        original_value: The source value before normalization.
        details: Source-specific record (variable id/scopes, style key,
            stylesheet file, ...).
    """

    source: TokenSource
    original_name: str
    original_value: Any = field(default=None, hash=False)
    details: dict[str, Any] = field(default_factory=dict, hash=False, compare=False)


@dataclass(frozen=True)
class Token:
    """A single named design value."""

    name: str
    path: tuple[str, ...]
    value: TokenValue
    type: TokenType
    metadata: TokenMetadata
    description: str = ""
    values_by_mode: dict[str, TokenValue] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Token name must be a non-empty string")
        if not self.path or not all(self.path):
            raise ValueError(f"Token {self.name!r} must have a non-empty path")
        if self.value is None:
            raise ValueError(f"Token {self.name!r} has no value")
        if self.values_by_mode and self.value not in self.values_by_mode.values():
            raise ValueError(
                f"Token {self.name!r}: default value is not one of its mode values"
            )

    @property
    def source(self) -> TokenSource:
        return self.metadata.source

    @property
    def needs_node_data(self) -> bool:
        """True when this is a placeholder whose value could not be resolved."""
        return isinstance(self.value, Unresolved)

    @property
    def modes(self) -> list[str]:
        return list(self.values_by_mode)
