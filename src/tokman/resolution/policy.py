"""Conflict resolution policies."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

from tokman.errors import InvalidPolicyError
from tokman.model.token import TokenSource


class ConflictPolicy(StrEnum):
    FIRST_SOURCE_WINS = "firstSourceWins"
    SECOND_SOURCE_WINS = "secondSourceWins"
    SOURCE_ORDER_WINS = "sourceOrderWins"
    THROW_ON_CONFLICT = "throwOnConflict"


# Historical names accepted in configuration files.
POLICY_ALIASES: dict[str, ConflictPolicy] = {
    "figmaWins": ConflictPolicy.FIRST_SOURCE_WINS,
    "cssWins": ConflictPolicy.SECOND_SOURCE_WINS,
    "throwError": ConflictPolicy.THROW_ON_CONFLICT,
}

DEFAULT_PRIMARY_SOURCES: tuple[TokenSource, ...] = (TokenSource.FIGMA, TokenSource.FIGMA_STYLE)
DEFAULT_SECONDARY_SOURCES: tuple[TokenSource, ...] = (TokenSource.STYLESHEET,)


def parse_policy(value: str | ConflictPolicy) -> ConflictPolicy:
    """Return the :class:`ConflictPolicy` for *value*, accepting historical aliases.

    Raises :class:`InvalidPolicyError` for anything else.
    """
    if isinstance(value, ConflictPolicy):
        return value
    if isinstance(value, str):
        if value in POLICY_ALIASES:
            return POLICY_ALIASES[value]
        try:
            return ConflictPolicy(value)
        except ValueError:
            pass
    raise InvalidPolicyError(value)


class Precedence:
    """An ordered list of prioritized source kinds.

    Sources earlier in the list outrank later ones; sources not in the list
    rank below every listed source and tie with each other. An incoming token
    replaces an existing one when it ranks at least as high, so ties degrade
    to last-write-wins.
    """

    def __init__(self, sources: Sequence[str]) -> None:
        self.sources = tuple(TokenSource(s) for s in sources)

    def rank(self, source: str) -> int:
        try:
            return self.sources.index(TokenSource(source))
        except ValueError:
            return len(self.sources)

    def prefers(self, incoming: str, existing: str) -> bool:
        return self.rank(incoming) <= self.rank(existing)

    def __repr__(self) -> str:
        return f"Precedence({[str(s) for s in self.sources]})"
