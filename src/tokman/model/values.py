"""Token value variants.

A token's ``value`` is one of these variants or a plain scalar
(``str``, ``int``, ``float``, ``bool``). The variant in use is determined by
the token's :class:`~tokman.model.token.TokenType`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


def format_number(value: float) -> str:
    """Format a number without a trailing ``.0`` for whole values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class Color:
    """An sRGB color: r/g/b integers in [0, 255], alpha fractional in [0, 1]."""

    r: int
    g: int
    b: int
    a: float = 1.0

    @property
    def hex(self) -> str:
        """``#rrggbb``, or ``#rrggbbaa`` when the color is translucent."""
        base = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a >= 1:
            return base
        return base + f"{round(self.a * 255):02x}"

    def to_css(self) -> str:
        if self.a >= 1:
            return self.hex
        return f"rgba({self.r}, {self.g}, {self.b}, {format_number(self.a)})"

    def to_dict(self) -> dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}


@dataclass(frozen=True)
class Dimension:
    """A numeric magnitude with a CSS unit, e.g. ``16px``."""

    value: float
    unit: str = "px"

    def __str__(self) -> str:
        return f"{format_number(self.value)}{self.unit}"


@dataclass(frozen=True)
class Shadow:
    """A drop or inner shadow effect."""

    kind: str  # "DROP_SHADOW" or "INNER_SHADOW"
    color: Color
    offset_x: float = 0
    offset_y: float = 0
    radius: float = 0
    spread: float = 0

    @property
    def inset(self) -> bool:
        return self.kind == "INNER_SHADOW"

    def to_css(self) -> str:
        parts = [
            f"{format_number(self.offset_x)}px",
            f"{format_number(self.offset_y)}px",
            f"{format_number(self.radius)}px",
            f"{format_number(self.spread)}px",
            self.color.to_css(),
        ]
        if self.inset:
            parts.insert(0, "inset")
        return " ".join(parts)

    def to_dict(self) -> dict[str, object]:
        return {
            "type": self.kind,
            "color": self.color.to_dict(),
            "offsetX": self.offset_x,
            "offsetY": self.offset_y,
            "radius": self.radius,
            "spread": self.spread,
        }


@dataclass(frozen=True)
class Unresolved:
    """Placeholder value for a style whose node data was not available."""

    node_id: str
    style_type: str


TokenValue = Union[Color, Dimension, Shadow, Unresolved, str, int, float, bool]
