"""Name and path derivation for source identifiers."""

from __future__ import annotations

import re

DEFAULT_SEPARATOR = "-"

_WHITESPACE_RE = re.compile(r"\s+")


def _segments(name: str) -> list[str]:
    return [seg.strip() for seg in name.split("/") if seg.strip()]


def derive_slash_name(name: str, separator: str = DEFAULT_SEPARATOR) -> tuple[str, tuple[str, ...]]:
    """Derive ``(token_name, path)`` from a slash-delimited hierarchical name.

    ``"Colors/Brand Primary"`` becomes ``("colors-brand-primary",
    ("Colors", "Brand Primary"))``: the flat name is lower-cased with ``/``
    and whitespace runs replaced by *separator*, while the path keeps the
    original segment text. An empty or all-separator name yields ``("", ())``.
    """
    if not name:
        return "", ()
    path = tuple(_segments(name))
    flat = separator.join(_WHITESPACE_RE.sub(separator, seg.lower()) for seg in path)
    return flat, path


def derive_custom_property_name(
    name: str, separator: str = DEFAULT_SEPARATOR
) -> tuple[str, tuple[str, ...]]:
    """Derive ``(token_name, path)`` from a CSS custom property name.

    The leading ``--`` is stripped and the rest lower-cased; the path is the
    dash-split of the result with empty segments dropped, and the name is
    the path joined again, so repeated dashes collapse.
    """
    if not name:
        return "", ()
    flat = name[2:] if name.startswith("--") else name
    flat = flat.strip().lower()
    if separator != "-":
        flat = flat.replace("-", separator)
    path = tuple(seg for seg in flat.split(separator) if seg)
    return separator.join(path), path


def child_name(
    base_name: str, base_path: tuple[str, ...], *suffix: str, separator: str = DEFAULT_SEPARATOR
) -> tuple[str, tuple[str, ...]]:
    """Append *suffix* segments to a derived ``(name, path)`` pair."""
    name = separator.join([base_name, *suffix])
    return name, base_path + tuple(suffix)
