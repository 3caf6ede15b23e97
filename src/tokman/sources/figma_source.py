from __future__ import annotations

import logging

from tokman.config import TokmanConfig
from tokman.errors import ConfigError
from tokman.figma.client import FigmaClient
from tokman.figma.parser import parse_styles_response, parse_variables_response
from tokman.transforms.base import TransformResult
from tokman.transforms.styles import StyleTransformer
from tokman.transforms.variables import VariableTransformer

log = logging.getLogger("tokman.sources")


class FigmaSource:
    """Source that reads variables (and optionally styles) from a Figma file.

    Styles only reference nodes, so the referenced nodes are fetched in one
    extra request before the style transformer runs.
    """

    def __init__(self, client: FigmaClient, file_key: str, process_styles: bool = True) -> None:
        self._client = client
        self._file_key = file_key
        self._process_styles = process_styles

    @classmethod
    def from_config(cls, config: TokmanConfig) -> FigmaSource:
        figma = config.figma
        if not figma.file_key:
            raise ConfigError("Figma file key is required (figma.fileKey or FIGMA_FILE_KEY)")
        if not figma.api_key:
            raise ConfigError("Figma API key is required (figma.apiKey or FIGMA_API_KEY)")
        client = FigmaClient(figma.api_key, base_url=figma.base_url, timeout=figma.timeout)
        return cls(client, figma.file_key, process_styles=figma.process_styles)

    @property
    def kind(self) -> str:
        return "figma"

    def load(self, config: TokmanConfig) -> TransformResult:
        log.info("Fetching Figma variables for file %s", self._file_key)
        payload = self._client.get_local_variables(self._file_key)
        variables = parse_variables_response(payload)
        result = VariableTransformer(config.separator).transform(variables)

        if self._process_styles:
            styles = parse_styles_response(self._client.get_styles(self._file_key))
            node_ids = list(dict.fromkeys(s.node_id for s in styles if s.node_id))
            nodes = self._client.get_nodes(self._file_key, node_ids)
            result.extend(StyleTransformer(config.separator).transform(styles, nodes))
        return result

    def close(self) -> None:
        self._client.close()
