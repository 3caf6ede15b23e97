from tokman.figma.client import FIGMA_API_BASE_URL, FigmaClient
from tokman.figma.errors import FigmaAPIError, FigmaError, InvalidResponseError
from tokman.figma.models import FigmaStyle, FigmaVariable, Mode, VariableCollection
from tokman.figma.parser import parse_styles_response, parse_variables_response

__all__ = [
    "FIGMA_API_BASE_URL",
    "FigmaClient",
    "FigmaError",
    "FigmaAPIError",
    "InvalidResponseError",
    "FigmaStyle",
    "FigmaVariable",
    "Mode",
    "VariableCollection",
    "parse_styles_response",
    "parse_variables_response",
]
