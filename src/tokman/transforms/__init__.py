from tokman.transforms.base import TransformResult
from tokman.transforms.styles import StyleTransformer
from tokman.transforms.stylesheet import StylesheetTransformer
from tokman.transforms.variables import VariableTransformer, select_default_mode

__all__ = [
    "TransformResult",
    "StyleTransformer",
    "StylesheetTransformer",
    "VariableTransformer",
    "select_default_mode",
]
