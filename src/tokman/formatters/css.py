"""Stylesheet variable output: CSS custom properties and SCSS variables."""

from __future__ import annotations

from collections.abc import Sequence

from tokman.formatters.values import to_css_value
from tokman.model.token import Token


def _writable(tokens: Sequence[Token]) -> list[Token]:
    return [t for t in tokens if not t.needs_node_data]


def _block(selector: str, lines: list[str]) -> str:
    body = "\n".join(f"  {line}" for line in lines)
    return f"{selector} {{\n{body}\n}}\n"


def format_css(
    tokens: Sequence[Token],
    *,
    selector: str = ":root",
    mode_selector: str | None = None,
) -> str:
    """Render tokens as ``--name: value;`` declarations inside *selector*.

    With *mode_selector* (e.g. ``'[data-mode="{mode}"]'``), an extra block is
    emitted for every mode that differs from a token's default value.
    """
    tokens = _writable(tokens)
    output = _block(selector, [f"--{t.name}: {to_css_value(t.value)};" for t in tokens])

    if mode_selector:
        per_mode: dict[str, list[str]] = {}
        for token in tokens:
            for mode, value in token.values_by_mode.items():
                if value == token.value:
                    continue
                per_mode.setdefault(mode, []).append(f"--{token.name}: {to_css_value(value)};")
        for mode, lines in per_mode.items():
            mode_key = mode.lower().replace(" ", "-")
            output += "\n" + _block(mode_selector.format(mode=mode_key), lines)
    return output


def format_scss(
    tokens: Sequence[Token],
    *,
    generate_map: bool = False,
    map_name: str = "tokens",
) -> str:
    """Render tokens as ``$name: value;`` SCSS variables, optionally with a map."""
    tokens = _writable(tokens)
    lines = [f"${t.name}: {to_css_value(t.value)};" for t in tokens]
    output = "\n".join(lines) + "\n" if lines else ""
    if generate_map:
        entries = ",\n".join(f"  '{t.name}': ${t.name}" for t in tokens)
        output += f"\n${map_name}: (\n{entries}\n);\n"
    return output
