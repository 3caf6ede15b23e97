"""Color normalization for fractional (0-1) RGBA source colors."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from tokman.model.values import Color

_CHANNELS = ("r", "g", "b", "a")


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _to_byte(component: float) -> int:
    return min(255, max(0, _round_half_away(component * 255)))


def normalize_color(raw: Any) -> Color | None:
    """Convert a ``{r, g, b, a}`` mapping with 0-1 components into a :class:`Color`.

    Returns ``None`` when *raw* is not a mapping or any channel is missing or
    non-numeric, so callers can skip the record.
    """
    if not isinstance(raw, Mapping):
        return None
    if not all(_is_number(raw.get(channel)) for channel in _CHANNELS):
        return None
    return Color(
        r=_to_byte(raw["r"]),
        g=_to_byte(raw["g"]),
        b=_to_byte(raw["b"]),
        a=raw["a"],
    )
