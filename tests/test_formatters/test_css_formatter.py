"""Tests for CSS and SCSS token output."""
from __future__ import annotations

import pytest

from tokman.config import OutputConfig
from tokman.errors import ConfigError
from tokman.formatters import format_css, format_scss, render, to_css_value, write_output
from tokman.model import Color, Dimension, Token, TokenMetadata, TokenSource, TokenType, Unresolved


def _token(name, value, token_type=TokenType.STRING, modes=None):
    return Token(
        name=name,
        path=tuple(name.split("-")),
        value=value,
        type=token_type,
        values_by_mode=modes or {},
        metadata=TokenMetadata(source=TokenSource.FIGMA, original_name=name),
    )


@pytest.fixture
def tokens():
    return [
        _token(
            "color-bg",
            Color(255, 255, 255, 1),
            TokenType.COLOR,
            modes={"Light": Color(255, 255, 255, 1), "Dark Mode": Color(0, 0, 0, 0.9)},
        ),
        _token("space-md", Dimension(16, "px"), TokenType.DIMENSION),
        _token("line-height", 1.5, TokenType.NUMBER),
        _token("surface", Unresolved("1:1", "FILL"), TokenType.COLOR),
    ]


class TestToCssValue:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (Color(255, 0, 0, 1), "#ff0000"),
            (Color(255, 0, 0, 0.5), "rgba(255, 0, 0, 0.5)"),
            (Dimension(1.5, "rem"), "1.5rem"),
            (16.0, "16"),
            (400, "400"),
            (True, "true"),
            ("Inter", "Inter"),
        ],
    )
    def test_values(self, value, expected):
        assert to_css_value(value) == expected


class TestFormatCss:
    def test_root_block_skips_placeholders(self, tokens):
        assert format_css(tokens) == (
            ":root {\n"
            "  --color-bg: #ffffff;\n"
            "  --space-md: 16px;\n"
            "  --line-height: 1.5;\n"
            "}\n"
        )

    def test_custom_selector(self, tokens):
        assert format_css(tokens[1:2], selector=".theme").startswith(".theme {\n")

    def test_mode_blocks_only_for_differing_values(self, tokens):
        css = format_css(tokens, mode_selector='[data-mode="{mode}"]')
        assert '[data-mode="dark-mode"] {\n  --color-bg: rgba(0, 0, 0, 0.9);\n}\n' in css
        assert "light" not in css


class TestFormatScss:
    def test_variables(self, tokens):
        assert format_scss(tokens) == (
            "$color-bg: #ffffff;\n$space-md: 16px;\n$line-height: 1.5;\n"
        )

    def test_map(self, tokens):
        scss = format_scss(tokens[1:3], generate_map=True, map_name="design")
        assert scss.endswith(
            "\n$design: (\n  'space-md': $space-md,\n  'line-height': $line-height\n);\n"
        )

    def test_empty(self):
        assert format_scss([]) == ""


class TestWriter:
    def test_render_dispatch(self, tokens):
        assert render(tokens, OutputConfig("css", "t.css")) == format_css(tokens)
        assert render(tokens, OutputConfig("scss", "t.scss", {"generateMap": True})).count("$tokens") == 1

    def test_unknown_formatter(self, tokens):
        with pytest.raises(ConfigError):
            render(tokens, OutputConfig("yaml", "t.yaml"))

    def test_write_creates_directories(self, tokens, tmp_path):
        path = write_output(tokens, OutputConfig("json", "dist/nested/tokens.json"), tmp_path)
        assert path == tmp_path / "dist" / "nested" / "tokens.json"
        assert path.read_text(encoding="utf-8").startswith("{")
