"""Tests for the token model and value variants."""

import pytest

from tokman.model import (
    Color,
    Diagnostic,
    Dimension,
    Severity,
    Shadow,
    Token,
    TokenMetadata,
    TokenSource,
    TokenType,
    Unresolved,
)


def _meta(source: TokenSource = TokenSource.FIGMA) -> TokenMetadata:
    return TokenMetadata(source=source, original_name="color/primary")


# ---------------------------------------------------------------------------
# Token invariants
# ---------------------------------------------------------------------------


class TestTokenInvariants:
    def test_minimal_token(self):
        token = Token(
            name="color-primary",
            path=("color", "primary"),
            value=Color(255, 0, 0, 1),
            type=TokenType.COLOR,
            metadata=_meta(),
        )
        assert token.description == ""
        assert token.values_by_mode == {}
        assert token.source is TokenSource.FIGMA
        assert not token.needs_node_data

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError, match="non-empty"):
            Token(name="", path=("a",), value=1, type=TokenType.NUMBER, metadata=_meta())

    def test_empty_path_rejected(self):
        with pytest.raises(ValueError, match="path"):
            Token(name="a", path=(), value=1, type=TokenType.NUMBER, metadata=_meta())

    def test_empty_path_segment_rejected(self):
        with pytest.raises(ValueError, match="path"):
            Token(name="a", path=("a", ""), value=1, type=TokenType.NUMBER, metadata=_meta())

    def test_none_value_rejected(self):
        with pytest.raises(ValueError, match="no value"):
            Token(name="a", path=("a",), value=None, type=TokenType.NUMBER, metadata=_meta())  # type: ignore[arg-type]

    def test_value_must_be_one_of_mode_values(self):
        with pytest.raises(ValueError, match="mode values"):
            Token(
                name="a",
                path=("a",),
                value=1,
                type=TokenType.NUMBER,
                metadata=_meta(),
                values_by_mode={"Light": 2, "Dark": 3},
            )

    def test_mode_values_containing_default(self):
        token = Token(
            name="a",
            path=("a",),
            value=2,
            type=TokenType.NUMBER,
            metadata=_meta(),
            values_by_mode={"Light": 2, "Dark": 3},
        )
        assert token.modes == ["Light", "Dark"]

    def test_token_is_frozen(self):
        token = Token(name="a", path=("a",), value=1, type=TokenType.NUMBER, metadata=_meta())
        with pytest.raises(AttributeError):
            token.value = 2  # type: ignore[misc]

    def test_placeholder_token(self):
        token = Token(
            name="surface",
            path=("surface",),
            value=Unresolved(node_id="1:2", style_type="FILL"),
            type=TokenType.COLOR,
            metadata=_meta(TokenSource.FIGMA_STYLE),
        )
        assert token.needs_node_data


# ---------------------------------------------------------------------------
# Value variants
# ---------------------------------------------------------------------------


class TestColor:
    def test_hex_opaque(self):
        assert Color(255, 0, 128, 1).hex == "#ff0080"

    def test_hex_translucent(self):
        assert Color(0, 0, 0, 0.5).hex == "#00000080"

    def test_css_opaque_uses_hex(self):
        assert Color(51, 102, 153, 1).to_css() == "#336699"

    def test_css_translucent_uses_rgba(self):
        assert Color(51, 102, 153, 0.8).to_css() == "rgba(51, 102, 153, 0.8)"

    def test_to_dict(self):
        assert Color(1, 2, 3, 0.5).to_dict() == {"r": 1, "g": 2, "b": 3, "a": 0.5}


class TestDimension:
    def test_whole_number(self):
        assert str(Dimension(16.0, "px")) == "16px"

    def test_fraction(self):
        assert str(Dimension(1.5, "rem")) == "1.5rem"


class TestShadow:
    def test_drop_shadow_css(self):
        shadow = Shadow("DROP_SHADOW", Color(0, 0, 0, 0.25), 0, 4, 8, 0)
        assert shadow.to_css() == "0px 4px 8px 0px rgba(0, 0, 0, 0.25)"

    def test_inner_shadow_is_inset(self):
        shadow = Shadow("INNER_SHADOW", Color(0, 0, 0, 1), 1, 1, 2, 0)
        assert shadow.inset
        assert shadow.to_css().startswith("inset ")


class TestDiagnostic:
    def test_str_with_location(self):
        diag = Diagnostic("no-modes", Severity.INFO, "no values", name="a/b", source="figma")
        assert str(diag) == "INFO [figma:a/b]: no values"

    def test_severity_flags(self):
        diag = Diagnostic("needs-node-data", Severity.WARNING, "missing")
        assert diag.is_warning
        assert not diag.is_error
