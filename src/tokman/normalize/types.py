"""Type inference for explicitly-typed and untyped source values."""

from __future__ import annotations

import re

from tokman.model.token import TokenType

FIGMA_TYPE_MAP: dict[str, TokenType] = {
    "COLOR": TokenType.COLOR,
    "FLOAT": TokenType.NUMBER,
    "STRING": TokenType.STRING,
    "BOOLEAN": TokenType.BOOLEAN,
}

DIMENSION_UNITS = ("px", "em", "rem", "%", "vw", "vh", "s", "ms")

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_COLOR_FUNC_RE = re.compile(r"^(?:rgb|rgba|hsl|hsla)\(", re.IGNORECASE)
_NUMBER_RE = re.compile(
    r"^[+-]?(?:\d*\.)?\d+(?P<unit>" + "|".join(re.escape(u) for u in DIMENSION_UNITS) + r")?$"
)


def map_figma_type(resolved_type: str) -> TokenType:
    """Map a Figma ``resolvedType`` tag to a token type; unknown tags become STRING."""
    return FIGMA_TYPE_MAP.get(resolved_type, TokenType.STRING)


def infer_css_type(value: str) -> TokenType:
    """Infer a token type from a raw stylesheet value.

    Precedence: color syntax, unit-suffixed number, bare number, string.
    ``var()`` and ``calc()`` expressions are never evaluated and stay strings.
    """
    value = value.strip() if value else ""
    if not value:
        return TokenType.STRING
    if _HEX_COLOR_RE.match(value) or _COLOR_FUNC_RE.match(value):
        return TokenType.COLOR
    match = _NUMBER_RE.match(value)
    if match:
        return TokenType.DIMENSION if match.group("unit") else TokenType.NUMBER
    return TokenType.STRING
