from tokman.sources.base import SourceAdapter
from tokman.sources.figma_source import FigmaSource
from tokman.sources.stylesheet_source import StylesheetSource

__all__ = ["SourceAdapter", "FigmaSource", "StylesheetSource"]
