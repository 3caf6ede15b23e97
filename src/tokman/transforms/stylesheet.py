"""Stylesheet transformer: CSS custom properties become tokens."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tokman.model.token import Token, TokenMetadata, TokenSource, TokenType
from tokman.normalize.naming import DEFAULT_SEPARATOR, derive_custom_property_name
from tokman.normalize.types import infer_css_type
from tokman.stylesheet.model import CustomProperty
from tokman.transforms.base import TransformResult

log = logging.getLogger("tokman.transforms")

_SOURCE = TokenSource.STYLESHEET


def _parse_number(text: str) -> int | float:
    number = float(text)
    if number.is_integer() and "." not in text:
        return int(number)
    return number


class StylesheetTransformer:
    """Turn :class:`CustomProperty` records into tokens.

    Only ``number`` values are converted (to ``int``/``float``); colors,
    dimensions and strings keep their trimmed literal text. Stylesheet
    tokens have no modes.
    """

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        self.separator = separator

    def transform(self, records: Sequence[CustomProperty]) -> TransformResult:
        result = TransformResult()
        for prop in records:
            name, path = derive_custom_property_name(prop.name, self.separator)
            if not name or not path:
                result.skip("empty-name", "custom property name is empty", prop.name, _SOURCE)
                continue
            text = prop.value.strip()
            if not text:
                result.skip("empty-value", "custom property has no value", prop.name, _SOURCE)
                log.debug("Skipping %s in %s: empty value", prop.name, prop.source_file)
                continue

            token_type = infer_css_type(text)
            value: str | int | float = text
            if token_type is TokenType.NUMBER:
                value = _parse_number(text)

            result.tokens.append(
                Token(
                    name=name,
                    path=path,
                    value=value,
                    type=token_type,
                    metadata=TokenMetadata(
                        source=_SOURCE,
                        original_name=prop.name,
                        original_value=prop.value,
                        details={"sourceFile": prop.source_file, "selector": prop.selector},
                    ),
                )
            )
        log.info(
            "Transformed %d of %d custom properties into tokens", len(result.tokens), len(records)
        )
        return result
