from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from tokman.config import TokmanConfig
from tokman.stylesheet.parser import read_custom_properties
from tokman.transforms.base import TransformResult
from tokman.transforms.stylesheet import StylesheetTransformer

log = logging.getLogger("tokman.sources")


class StylesheetSource:
    """Source that reads CSS custom properties from stylesheet files, in the given order.

    Raises FileNotFoundError if a stylesheet does not exist.
    """

    def __init__(self, paths: Sequence[str | Path]) -> None:
        self._paths = [Path(p) for p in paths]

    @property
    def kind(self) -> str:
        return "stylesheet"

    def load(self, config: TokmanConfig) -> TransformResult:
        properties = []
        for path in self._paths:
            if not path.exists():
                raise FileNotFoundError(f"Stylesheet not found: {path}")
            found = read_custom_properties(path)
            log.info("Found %d custom properties in %s", len(found), path)
            properties.extend(found)
        return StylesheetTransformer(config.separator).transform(properties)
