from __future__ import annotations

from typing import Protocol

from tokman.config import TokmanConfig
from tokman.transforms.base import TransformResult


class SourceAdapter(Protocol):
    """Protocol for token sources: fetch raw records and transform them."""

    @property
    def kind(self) -> str: ...

    def load(self, config: TokmanConfig) -> TransformResult:
        """Fetch source records and return the tokens they produce."""
        ...
