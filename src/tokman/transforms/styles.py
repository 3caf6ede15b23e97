"""Style transformer: Figma fill, text and effect styles become tokens.

A published style only references the node that carries its values, so
values are read from a separately fetched node map (``/files/:key/nodes``).
Styles whose node data is missing or yields nothing usable become
placeholder tokens (value :class:`~tokman.model.values.Unresolved`) instead
of being dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from tokman.figma.models import FigmaStyle
from tokman.model.token import Token, TokenMetadata, TokenSource, TokenType
from tokman.model.values import Dimension, Shadow, TokenValue, Unresolved, format_number
from tokman.normalize.color import normalize_color
from tokman.normalize.naming import DEFAULT_SEPARATOR, child_name, derive_slash_name
from tokman.transforms.base import TransformResult

log = logging.getLogger("tokman.transforms")

_SOURCE = TokenSource.FIGMA_STYLE

_SHADOW_EFFECTS = ("DROP_SHADOW", "INNER_SHADOW")
_BLUR_EFFECTS = ("LAYER_BLUR", "BACKGROUND_BLUR")

# Placeholder type per style category.
_PLACEHOLDER_TYPES = {
    "FILL": TokenType.COLOR,
    "TEXT": TokenType.TYPOGRAPHY,
    "EFFECT": TokenType.SHADOW,
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _number_or_zero(value: Any) -> float:
    return value if _is_number(value) else 0


def _kebab(value: str) -> str:
    return value.lower().replace("_", "-")


def node_document(nodes: Mapping[str, Any] | None, node_id: str) -> dict[str, Any] | None:
    """Return the document of *node_id* from a ``/nodes`` response map.

    Accepts entries wrapped as ``{"document": {...}}`` (the API shape) or bare
    node documents.
    """
    if not nodes or not node_id:
        return None
    entry = nodes.get(node_id)
    if not isinstance(entry, dict):
        return None
    document = entry.get("document", entry)
    return document if isinstance(document, dict) else None


class _StyleContext:
    """Naming and metadata shared by all tokens produced for one style."""

    def __init__(self, style: FigmaStyle, separator: str) -> None:
        self.style = style
        self.separator = separator
        self.name, self.path = derive_slash_name(style.name, separator)

    def metadata(self, original_value: Any = None, **extra: Any) -> TokenMetadata:
        details = {
            "styleKey": self.style.key,
            "nodeId": self.style.node_id,
            "styleType": self.style.style_type,
        }
        details.update(extra)
        return TokenMetadata(
            source=_SOURCE,
            original_name=self.style.name,
            original_value=original_value,
            details=details,
        )

    def token(
        self,
        suffix: tuple[str, ...],
        value: TokenValue,
        token_type: TokenType,
        label: str,
        original_value: Any = None,
        **extra: Any,
    ) -> Token:
        name, path = child_name(self.name, self.path, *suffix, separator=self.separator)
        return Token(
            name=name,
            path=path,
            value=value,
            type=token_type,
            description=self.style.description or f"{self.style.name} {label}",
            metadata=self.metadata(original_value, **extra),
        )

    def placeholder(self) -> Token:
        return Token(
            name=self.name,
            path=self.path,
            value=Unresolved(node_id=self.style.node_id, style_type=self.style.style_type),
            type=_PLACEHOLDER_TYPES[self.style.style_type],
            description=self.style.description,
            metadata=self.metadata(needsNodeData=True),
        )


class StyleTransformer:
    """Turn :class:`FigmaStyle` records plus node details into tokens.

    Dispatch by style type:
        - ``FILL``: one color token from the node's first visible solid fill.
        - ``TEXT``: up to eight typography sub-tokens (``{name}-font-size`` ...).
        - ``EFFECT``: one token per visible shadow or blur effect
          (``{name}-{index}-drop-shadow`` ...).
    """

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        self.separator = separator

    def transform(
        self, records: Sequence[FigmaStyle], nodes: Mapping[str, Any] | None = None
    ) -> TransformResult:
        result = TransformResult()
        for style in records:
            ctx = _StyleContext(style, self.separator)
            if not ctx.name:
                result.skip("empty-name", "style name is empty", style.key, _SOURCE)
                continue
            handler = self._handlers.get(style.style_type)
            if handler is None:
                result.skip(
                    "unsupported-style-type",
                    f"style type {style.style_type!r} is not supported",
                    style.name,
                    _SOURCE,
                )
                continue
            tokens = handler(self, ctx, node_document(nodes, style.node_id))
            if not tokens:
                tokens = [ctx.placeholder()]
                result.warn(
                    "needs-node-data",
                    f"no usable node data for {style.style_type} style (node {style.node_id})",
                    style.name,
                    _SOURCE,
                )
                log.warning("Style %r needs node data (node %s)", style.name, style.node_id)
            result.tokens.extend(tokens)
        log.info("Transformed %d styles into %d tokens", len(records), len(result.tokens))
        return result

    # ---- fill ----

    def _fill_tokens(self, ctx: _StyleContext, node: dict[str, Any] | None) -> list[Token]:
        if node is None:
            return []
        for fill in node.get("fills") or []:
            if not isinstance(fill, dict) or fill.get("type") != "SOLID":
                continue
            if fill.get("visible", True) is False or not fill.get("color"):
                continue
            color = normalize_color(fill["color"])
            if color is None:
                continue
            return [
                Token(
                    name=ctx.name,
                    path=ctx.path,
                    value=color,
                    type=TokenType.COLOR,
                    description=ctx.style.description,
                    metadata=ctx.metadata(fill["color"]),
                )
            ]
        return []

    # ---- text ----

    def _text_tokens(self, ctx: _StyleContext, node: dict[str, Any] | None) -> list[Token]:
        style = node.get("style") if node else None
        if not isinstance(style, dict):
            return []

        tokens: list[Token] = []

        def add(attribute: str, value: TokenValue, token_type: TokenType, label: str, raw: Any) -> None:
            tokens.append(ctx.token((attribute,), value, token_type, label, raw))

        family = style.get("fontFamily")
        if family:
            add("font-family", str(family), TokenType.FONT_FAMILY, "Font Family", family)

        weight = style.get("fontWeight")
        if _is_number(weight):
            add("font-weight", weight, TokenType.FONT_WEIGHT, "Font Weight", weight)

        size = style.get("fontSize")
        if _is_number(size):
            add("font-size", Dimension(size, "px"), TokenType.DIMENSION, "Font Size", size)

        spacing = _letter_spacing(style.get("letterSpacing"))
        if spacing is not None:
            add("letter-spacing", spacing, TokenType.DIMENSION, "Letter Spacing", style.get("letterSpacing"))

        line_height = _line_height(style)
        if line_height is not None:
            raw_line_height = {k: v for k, v in style.items() if k.startswith("lineHeight")}
            add("line-height", line_height, TokenType.DIMENSION, "Line Height", raw_line_height)

        for field_name, attribute, label in (
            ("textAlignHorizontal", "text-align", "Text Align"),
            ("textCase", "text-case", "Text Case"),
            ("textDecoration", "text-decoration", "Text Decoration"),
        ):
            raw = style.get(field_name)
            if isinstance(raw, str) and raw:
                add(attribute, _kebab(raw), TokenType.STRING, label, raw)

        return tokens

    # ---- effect ----

    def _effect_tokens(self, ctx: _StyleContext, node: dict[str, Any] | None) -> list[Token]:
        effects = node.get("effects") if node else None
        if not isinstance(effects, list):
            return []

        tokens: list[Token] = []
        for index, effect in enumerate(effects):
            if not isinstance(effect, dict) or effect.get("visible") is False:
                continue
            kind = str(effect.get("type", ""))
            label = f"{kind} {index}"
            if kind in _SHADOW_EFFECTS:
                color = normalize_color(effect.get("color"))
                if color is None:
                    continue
                offset = effect.get("offset")
                if not isinstance(offset, dict):
                    offset = {}
                value: TokenValue = Shadow(
                    kind=kind,
                    color=color,
                    offset_x=_number_or_zero(offset.get("x")),
                    offset_y=_number_or_zero(offset.get("y")),
                    radius=_number_or_zero(effect.get("radius")),
                    spread=_number_or_zero(effect.get("spread")),
                )
                token_type = TokenType.SHADOW
            elif kind in _BLUR_EFFECTS and _is_number(effect.get("radius")):
                value = Dimension(effect["radius"], "px")
                token_type = TokenType.DIMENSION
            else:
                continue
            tokens.append(
                ctx.token(
                    (str(index), _kebab(kind)),
                    value,
                    token_type,
                    label,
                    effect,
                    effectIndex=index,
                )
            )
        return tokens

    _handlers = {
        "FILL": _fill_tokens,
        "TEXT": _text_tokens,
        "EFFECT": _effect_tokens,
    }


def _letter_spacing(raw: Any) -> str | None:
    if isinstance(raw, dict) and _is_number(raw.get("value")):
        unit = "%" if raw.get("unit") == "PERCENT" else "px"
        return f"{format_number(raw['value'])}{unit}"
    if _is_number(raw):
        return f"{format_number(raw)}px"
    return None


def _line_height(style: dict[str, Any]) -> str | None:
    unit = style.get("lineHeightUnit")
    if unit == "FONT_SIZE_%" and _is_number(style.get("lineHeightPercentFontSize")):
        return f"{format_number(style['lineHeightPercentFontSize'])}%"
    if unit in ("PERCENT", "INTRINSIC_%") and _is_number(style.get("lineHeightPercent")):
        return f"{format_number(style['lineHeightPercent'])}%"
    if _is_number(style.get("lineHeightPx")):
        return f"{format_number(style['lineHeightPx'])}px"
    return None
