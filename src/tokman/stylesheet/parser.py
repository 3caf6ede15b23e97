"""Lark-based extraction of CSS custom properties.

Syntax example:
    :root { --color-primary: #0d6efd; --space-md: 16px; }
    @media (prefers-color-scheme: dark) {
        :root { --color-primary: #6ea8fe; }
    }
"""

from __future__ import annotations

import functools
import re
from pathlib import Path

from lark import Lark, Token, Transformer, UnexpectedInput

from tokman.errors import StylesheetParseError
from tokman.stylesheet.model import CustomProperty

__all__ = ["extract_custom_properties", "read_custom_properties"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")
_IMPORTANT_RE = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)


def _blank(match: re.Match[str]) -> str:
    # Keep newlines so parse errors report the right line.
    return re.sub(r"[^\n]", " ", match.group())


class _Declaration:
    def __init__(self, text: str) -> None:
        self.text = text


class _Block:
    def __init__(self, context: str, items: list[object]) -> None:
        self.context = context
        self.items = items


class _CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into nested blocks and declarations."""

    def declaration(self, items: list[Token]) -> _Declaration:
        return _Declaration(str(items[0]))

    def block(self, items: list[object]) -> list[object]:
        return items

    def rule(self, items: list[object]) -> _Block:
        return _Block(_WHITESPACE_RE.sub(" ", str(items[0])).strip(), items[1])  # type: ignore[arg-type]

    def at_rule(self, items: list[object]) -> _Block | None:
        keyword = str(items[0])
        prelude = str(items[1]).strip() if items[1] is not None else ""
        body = items[2] if len(items) > 2 and isinstance(items[2], list) else []
        context = f"{keyword} {_WHITESPACE_RE.sub(' ', prelude)}".strip()
        return _Block(context, body)

    def start(self, items: list[object]) -> list[object]:
        return items


@functools.lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def _split_declaration(text: str) -> tuple[str, str] | None:
    name, sep, value = text.partition(":")
    if not sep:
        return None
    value = _IMPORTANT_RE.sub("", value)
    return name.strip(), _WHITESPACE_RE.sub(" ", value).strip()


def _walk(
    items: list[object], context: list[str], source_file: str, out: list[CustomProperty]
) -> None:
    for item in items:
        if isinstance(item, _Declaration):
            parts = _split_declaration(item.text)
            if parts is None or not parts[0].startswith("--"):
                continue
            out.append(
                CustomProperty(
                    name=parts[0],
                    value=parts[1],
                    source_file=source_file,
                    selector=" ".join(context),
                )
            )
        elif isinstance(item, _Block):
            _walk(item.items, [*context, item.context], source_file, out)


def extract_custom_properties(source: str, source_file: str = "unknown.css") -> list[CustomProperty]:
    """Extract every ``--*`` declaration from *source*, in document order.

    Raises :class:`StylesheetParseError` if the stylesheet is syntactically broken.
    """
    if not source or not source.strip():
        return []
    cleaned = _COMMENT_RE.sub(_blank, source)
    try:
        tree = _parser().parse(cleaned)
    except UnexpectedInput as e:
        raise StylesheetParseError(
            f"{source_file}: {e}",
            line=getattr(e, "line", None),
            column=getattr(e, "column", None),
            source_file=source_file,
        ) from e
    items = _CssTransformer().transform(tree)
    properties: list[CustomProperty] = []
    _walk(items, [], source_file, properties)
    return properties


def read_custom_properties(path: str | Path) -> list[CustomProperty]:
    """Read a stylesheet file and extract its custom properties."""
    path = Path(path)
    return extract_custom_properties(path.read_text(encoding="utf-8"), str(path))
