from tokman.normalize.color import normalize_color
from tokman.normalize.naming import (
    DEFAULT_SEPARATOR,
    child_name,
    derive_custom_property_name,
    derive_slash_name,
)
from tokman.normalize.types import infer_css_type, map_figma_type

__all__ = [
    "normalize_color",
    "DEFAULT_SEPARATOR",
    "child_name",
    "derive_custom_property_name",
    "derive_slash_name",
    "infer_css_type",
    "map_figma_type",
]
