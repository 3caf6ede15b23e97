"""Error hierarchy for the Figma REST client."""

from __future__ import annotations

from typing import Any


class FigmaError(Exception):
    """Base error for all Figma client errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class FigmaAPIError(FigmaError):
    """The Figma API answered with a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        retryable: bool = False,
        retry_after: float | None = None,
        raw: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.retryable = retryable
        self.retry_after = retry_after
        self.raw = raw


class AuthenticationError(FigmaAPIError):
    """Invalid, expired or under-scoped personal access token."""


class NotFoundError(FigmaAPIError):
    """Unknown file key or node id."""


class RateLimitError(FigmaAPIError):
    """Rate limit exceeded."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)


class ServerError(FigmaAPIError):
    """Server-side error from Figma."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)


class RequestTimeoutError(FigmaError):
    """A request timed out."""


class NetworkError(FigmaError):
    """A network-level error occurred."""


class InvalidResponseError(FigmaError):
    """The response body did not have the expected structure."""


def _parse_retry_after(value: str | None) -> float | None:
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def error_from_status_code(
    status_code: int,
    message: str,
    *,
    raw: dict[str, Any] | None = None,
    retry_after: str | None = None,
) -> FigmaAPIError:
    """Map an HTTP status code to the matching :class:`FigmaAPIError` subclass."""
    text = f"Figma API request failed with status {status_code}: {message}"
    if status_code in (401, 403):
        return AuthenticationError(text, status_code=status_code, raw=raw)
    if status_code == 404:
        return NotFoundError(text, status_code=status_code, raw=raw)
    if status_code == 429:
        return RateLimitError(
            text,
            status_code=status_code,
            retry_after=_parse_retry_after(retry_after),
            raw=raw,
        )
    if status_code >= 500:
        return ServerError(text, status_code=status_code, raw=raw)
    return FigmaAPIError(text, status_code=status_code, raw=raw)
