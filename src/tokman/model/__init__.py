"""tokman model layer -- public type re-exports."""

from tokman.model.diagnostic import Diagnostic, Severity
from tokman.model.token import Token, TokenMetadata, TokenSource, TokenType
from tokman.model.values import Color, Dimension, Shadow, TokenValue, Unresolved

__all__ = [
    # token
    "Token",
    "TokenType",
    "TokenSource",
    "TokenMetadata",
    # values
    "TokenValue",
    "Color",
    "Dimension",
    "Shadow",
    "Unresolved",
    # diagnostic
    "Severity",
    "Diagnostic",
]
