"""Error hierarchy for tokman.

Remote API errors live in :mod:`tokman.figma.errors`; everything raised by
the core pipeline, configuration and stylesheet parsing lives here.
"""

from __future__ import annotations


class TokmanError(Exception):
    """Base error for all tokman errors."""


class ConfigError(TokmanError):
    """Invalid or incomplete configuration."""


class StylesheetParseError(TokmanError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        source_file: str = "",
    ) -> None:
        self.line = line
        self.column = column
        self.source_file = source_file
        super().__init__(message)


class ResolutionError(TokmanError):
    """Base error for conflict resolution failures."""


class InvalidPolicyError(ResolutionError, ValueError):
    """The conflict policy selector is not one of the supported policies."""

    def __init__(self, policy: object) -> None:
        self.policy = policy
        super().__init__(f"Unknown conflict policy: {policy!r}")


class TokenConflictError(ResolutionError):
    """Two tokens share a name under the ``throwOnConflict`` policy."""

    def __init__(self, name: str, existing_source: str, incoming_source: str) -> None:
        self.name = name
        self.existing_source = existing_source
        self.incoming_source = incoming_source
        super().__init__(
            f"Token name conflict for {name!r} between sources "
            f"{existing_source!r} and {incoming_source!r}"
        )
