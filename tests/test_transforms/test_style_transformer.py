"""Tests for turning Figma styles and node data into tokens."""
from __future__ import annotations

import pytest

from tokman.figma import FigmaStyle, parse_styles_response
from tokman.model import Color, Dimension, Severity, Shadow, TokenSource, TokenType, Unresolved
from tokman.transforms import StyleTransformer
from tokman.transforms.styles import node_document


@pytest.fixture
def styles(styles_payload):
    return parse_styles_response(styles_payload)


@pytest.fixture
def nodes(nodes_payload):
    return nodes_payload["nodes"]


def _by_name(result):
    return {t.name: t for t in result.tokens}


class TestNodeDocument:
    def test_wrapped(self, nodes):
        assert node_document(nodes, "10:1")["id"] == "10:1"

    def test_bare(self):
        assert node_document({"1:1": {"id": "1:1"}}, "1:1") == {"id": "1:1"}

    def test_missing(self, nodes):
        assert node_document(nodes, "99:9") is None
        assert node_document(None, "10:1") is None


# ---------------------------------------------------------------------------
# Fill styles
# ---------------------------------------------------------------------------


class TestFillStyles:
    def test_first_visible_solid_fill(self, styles, nodes):
        tokens = _by_name(StyleTransformer().transform(styles[:1], nodes))
        card = tokens["surface-card"]
        assert card.value == Color(255, 255, 255, 1)
        assert card.type is TokenType.COLOR
        assert card.path == ("Surface", "Card")
        assert card.description == "Card background"
        assert card.source is TokenSource.FIGMA_STYLE
        assert card.metadata.details["styleKey"] == "fill-key"
        assert card.metadata.details["nodeId"] == "10:1"

    def test_gradient_only_becomes_placeholder(self, styles):
        nodes = {"10:1": {"document": {"fills": [{"type": "GRADIENT_LINEAR"}]}}}
        result = StyleTransformer().transform(styles[:1], nodes)
        assert result.tokens[0].needs_node_data


# ---------------------------------------------------------------------------
# Text styles
# ---------------------------------------------------------------------------


class TestTextStyles:
    def test_sub_tokens(self, styles, nodes):
        tokens = _by_name(StyleTransformer().transform(styles[1:2], nodes))
        assert list(tokens) == [
            "heading-h1-font-family",
            "heading-h1-font-weight",
            "heading-h1-font-size",
            "heading-h1-letter-spacing",
            "heading-h1-line-height",
            "heading-h1-text-align",
            "heading-h1-text-case",
            "heading-h1-text-decoration",
        ]
        assert tokens["heading-h1-font-family"].value == "Inter"
        assert tokens["heading-h1-font-family"].type is TokenType.FONT_FAMILY
        assert tokens["heading-h1-font-weight"].value == 700
        assert tokens["heading-h1-font-weight"].type is TokenType.FONT_WEIGHT
        assert tokens["heading-h1-font-size"].value == Dimension(32, "px")
        assert tokens["heading-h1-letter-spacing"].value == "-0.5px"
        assert tokens["heading-h1-line-height"].value == "40px"
        assert tokens["heading-h1-text-align"].value == "left"
        assert tokens["heading-h1-text-case"].value == "small-caps"
        assert tokens["heading-h1-text-decoration"].value == "underline"

    def test_sub_token_paths_and_descriptions(self, styles, nodes):
        tokens = _by_name(StyleTransformer().transform(styles[1:2], nodes))
        size = tokens["heading-h1-font-size"]
        assert size.path == ("Heading", "H1", "font-size")
        assert size.description == "Heading/H1 Font Size"

    def test_partial_style(self, styles):
        nodes = {"10:2": {"document": {"style": {"fontSize": 14}}}}
        tokens = _by_name(StyleTransformer().transform(styles[1:2], nodes))
        assert list(tokens) == ["heading-h1-font-size"]

    @pytest.mark.parametrize(
        "style, expected",
        [
            ({"lineHeightUnit": "FONT_SIZE_%", "lineHeightPercentFontSize": 150}, "150%"),
            ({"lineHeightUnit": "INTRINSIC_%", "lineHeightPercent": 100, "lineHeightPx": 20}, "100%"),
            ({"lineHeightUnit": "PIXELS", "lineHeightPx": 24.5}, "24.5px"),
        ],
    )
    def test_line_height_units(self, styles, style, expected):
        nodes = {"10:2": {"document": {"style": style}}}
        tokens = _by_name(StyleTransformer().transform(styles[1:2], nodes))
        assert tokens["heading-h1-line-height"].value == expected

    def test_line_height_keeps_raw_fields(self, styles, nodes):
        tokens = _by_name(StyleTransformer().transform(styles[1:2], nodes))
        assert tokens["heading-h1-line-height"].metadata.original_value == {
            "lineHeightPx": 40,
            "lineHeightUnit": "PIXELS",
        }

    def test_percent_letter_spacing(self, styles):
        nodes = {"10:2": {"document": {"style": {"letterSpacing": {"value": 2, "unit": "PERCENT"}}}}}
        tokens = _by_name(StyleTransformer().transform(styles[1:2], nodes))
        assert tokens["heading-h1-letter-spacing"].value == "2%"


# ---------------------------------------------------------------------------
# Effect styles
# ---------------------------------------------------------------------------


class TestEffectStyles:
    def test_shadow_and_blur(self, styles, nodes):
        tokens = _by_name(StyleTransformer().transform(styles[2:], nodes))
        assert list(tokens) == ["elevation-raised-0-drop-shadow", "elevation-raised-1-layer-blur"]

        shadow = tokens["elevation-raised-0-drop-shadow"]
        assert shadow.type is TokenType.SHADOW
        assert shadow.value == Shadow("DROP_SHADOW", Color(0, 0, 0, 0.25), 0, 4, 8, 0)
        assert shadow.path == ("Elevation", "Raised", "0", "drop-shadow")
        assert shadow.metadata.details["effectIndex"] == 0

        blur = tokens["elevation-raised-1-layer-blur"]
        assert blur.type is TokenType.DIMENSION
        assert blur.value == Dimension(4, "px")

    def test_invisible_effects_skipped(self, styles):
        nodes = {
            "10:3": {
                "document": {
                    "effects": [
                        {"type": "DROP_SHADOW", "visible": False, "color": {"r": 0, "g": 0, "b": 0, "a": 1}},
                        {"type": "INNER_SHADOW", "color": {"r": 0, "g": 0, "b": 0, "a": 1}, "radius": 2},
                    ]
                }
            }
        }
        tokens = _by_name(StyleTransformer().transform(styles[2:], nodes))
        assert list(tokens) == ["elevation-raised-1-inner-shadow"]
        assert tokens["elevation-raised-1-inner-shadow"].value.inset

    def test_malformed_shadow_fields_default_to_zero(self, styles):
        nodes = {
            "10:3": {
                "document": {
                    "effects": [
                        {
                            "type": "DROP_SHADOW",
                            "color": {"r": 0, "g": 0, "b": 0, "a": 1},
                            "offset": [0, 2],
                            "radius": None,
                            "spread": "4",
                        }
                    ]
                }
            }
        }
        result = StyleTransformer().transform(styles[2:], nodes)
        shadow = result.tokens[0].value
        assert shadow == Shadow("DROP_SHADOW", Color(0, 0, 0, 1), 0, 0, 0, 0)
        assert shadow.to_css() == "0px 0px 0px 0px #000000"

    def test_bad_effect_does_not_stop_batch(self, styles, nodes):
        nodes = dict(nodes)
        nodes["10:3"] = {
            "document": {
                "effects": [
                    {"type": "DROP_SHADOW", "color": {"r": 0, "g": 0, "b": 0, "a": 1}, "offset": "x"},
                ]
            }
        }
        result = StyleTransformer().transform(styles, nodes)
        names = [t.name for t in result.tokens]
        assert "surface-card" in names
        assert "heading-h1-font-size" in names
        assert "elevation-raised-0-drop-shadow" in names


# ---------------------------------------------------------------------------
# Placeholders and skips
# ---------------------------------------------------------------------------


class TestPlaceholders:
    def test_all_effects_invisible(self, styles):
        nodes = {
            "10:3": {
                "document": {
                    "effects": [
                        {"type": "DROP_SHADOW", "visible": False, "color": {"r": 0, "g": 0, "b": 0, "a": 1}},
                        {"type": "LAYER_BLUR", "visible": False, "radius": 4},
                    ]
                }
            }
        }
        result = StyleTransformer().transform(styles[2:], nodes)
        assert [(t.name, t.needs_node_data) for t in result.tokens] == [("elevation-raised", True)]
        assert [d.code for d in result.diagnostics] == ["needs-node-data"]

    def test_missing_node_data(self, styles):
        result = StyleTransformer().transform(styles)
        assert [t.name for t in result.tokens] == ["surface-card", "heading-h1", "elevation-raised"]
        assert all(t.needs_node_data for t in result.tokens)
        assert [t.type for t in result.tokens] == [
            TokenType.COLOR,
            TokenType.TYPOGRAPHY,
            TokenType.SHADOW,
        ]
        assert result.tokens[0].value == Unresolved(node_id="10:1", style_type="FILL")
        assert result.tokens[0].metadata.details["needsNodeData"] is True
        assert result.placeholders == result.tokens

    def test_placeholder_warnings(self, styles):
        result = StyleTransformer().transform(styles)
        assert [d.code for d in result.diagnostics] == ["needs-node-data"] * 3
        assert all(d.severity is Severity.WARNING for d in result.diagnostics)

    def test_placeholder_logged(self, styles, caplog):
        with caplog.at_level("WARNING", logger="tokman.transforms"):
            StyleTransformer().transform(styles[:1])
        assert "needs node data" in caplog.text

    def test_unsupported_type(self):
        grid = FigmaStyle(key="g", node_id="1:1", name="Layout/Grid", style_type="GRID")
        result = StyleTransformer().transform([grid])
        assert result.tokens == []
        assert [d.code for d in result.diagnostics] == ["unsupported-style-type"]

    def test_empty_name(self):
        style = FigmaStyle(key="k", node_id="1:1", name="", style_type="FILL")
        result = StyleTransformer().transform([style])
        assert result.tokens == []
        assert [d.code for d in result.diagnostics] == ["empty-name"]
