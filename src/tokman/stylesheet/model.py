"""Stylesheet model: custom property records extracted from CSS."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomProperty:
    """A single ``--name: value`` declaration found in a stylesheet.

    ``selector`` is the enclosing rule context (at-rule preludes included),
    e.g. ``"@media (prefers-color-scheme: dark) :root"``.
    """

    name: str  # "--color-primary"
    value: str  # raw text, whitespace collapsed
    source_file: str
    selector: str = ""
