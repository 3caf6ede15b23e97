"""Figma REST client built on httpx."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from tokman.figma.errors import (
    InvalidResponseError,
    NetworkError,
    RequestTimeoutError,
    error_from_status_code,
)

FIGMA_API_BASE_URL = "https://api.figma.com/v1"
DEFAULT_TIMEOUT = 30.0

log = logging.getLogger("tokman.figma")


def _error_message(body: Any, raw_text: str) -> str:
    if isinstance(body, dict):
        for key in ("err", "message", "error"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return raw_text or "no response body"


class FigmaClient:
    """Thin wrapper around :mod:`httpx` for the Figma variables, styles and nodes endpoints.

    Transport failures and non-2xx responses are mapped onto
    :mod:`tokman.figma.errors` exceptions.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = FIGMA_API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            headers={"X-Figma-Token": api_key},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    def __enter__(self) -> FigmaClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get(self, path: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        log.debug("GET %s params=%s", path, params)
        try:
            resp = self._client.get(path, params=params)
        except httpx.TimeoutException as exc:
            raise RequestTimeoutError(str(exc), cause=exc) from exc
        except httpx.TransportError as exc:
            raise NetworkError(str(exc), cause=exc) from exc

        try:
            body = resp.json()
        except ValueError:
            body = None

        if resp.status_code >= 300:
            raise error_from_status_code(
                resp.status_code,
                _error_message(body, resp.text),
                raw=body if isinstance(body, dict) else None,
                retry_after=resp.headers.get("retry-after"),
            )
        if not isinstance(body, dict):
            raise InvalidResponseError(f"Expected a JSON object from {path}")
        return body

    def get_local_variables(self, file_key: str) -> dict[str, Any]:
        """Return the raw ``/variables/local`` response for *file_key*."""
        body = self._get(f"/files/{file_key}/variables/local")
        meta = body.get("meta")
        if not isinstance(meta, dict) or "variables" not in meta:
            raise InvalidResponseError("Variables response has no meta.variables")
        log.info(
            "Fetched %d variables from file %s", len(meta.get("variables") or {}), file_key
        )
        return body

    def get_styles(self, file_key: str) -> list[dict[str, Any]]:
        """Return the published styles (``meta.styles``) of *file_key*."""
        body = self._get(f"/files/{file_key}/styles")
        styles = (body.get("meta") or {}).get("styles")
        if not isinstance(styles, list):
            raise InvalidResponseError("Styles response has no meta.styles list")
        log.info("Fetched %d styles from file %s", len(styles), file_key)
        return styles

    def get_nodes(self, file_key: str, node_ids: Sequence[str]) -> dict[str, Any]:
        """Return the ``nodes`` map for *node_ids*; no request is made for an empty list."""
        if not node_ids:
            return {}
        body = self._get(f"/files/{file_key}/nodes", params={"ids": ",".join(node_ids)})
        nodes = body.get("nodes")
        if not isinstance(nodes, dict):
            raise InvalidResponseError("Nodes response has no nodes map")
        return nodes

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()
