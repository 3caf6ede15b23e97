"""Conflict resolver: deduplicate tokens by name under a precedence policy."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tokman.errors import TokenConflictError
from tokman.model.token import Token, TokenSource
from tokman.resolution.policy import (
    DEFAULT_PRIMARY_SOURCES,
    DEFAULT_SECONDARY_SOURCES,
    ConflictPolicy,
    Precedence,
    parse_policy,
)

log = logging.getLogger("tokman.resolution")


def resolve_conflicts(
    tokens: Sequence[Token],
    policy: str | ConflictPolicy = ConflictPolicy.FIRST_SOURCE_WINS,
    *,
    primary_sources: Sequence[str] = DEFAULT_PRIMARY_SOURCES,
    secondary_sources: Sequence[str] = DEFAULT_SECONDARY_SOURCES,
) -> list[Token]:
    """Deduplicate *tokens* by name.

    Policies:
        - ``firstSourceWins``: tokens from *primary_sources* win regardless of order.
        - ``secondSourceWins``: tokens from *secondary_sources* win regardless of order.
        - ``sourceOrderWins``: the last token seen for a name wins.
        - ``throwOnConflict``: any duplicate name raises :class:`TokenConflictError`.

    The output keeps the order in which each name was first seen. Tokens are
    never modified; a winning token replaces the stored one for its name.

    Raises :class:`InvalidPolicyError` if *policy* is not a known policy.
    """
    policy = parse_policy(policy)
    precedence: Precedence | None = None
    if policy is ConflictPolicy.FIRST_SOURCE_WINS:
        precedence = Precedence(primary_sources)
    elif policy is ConflictPolicy.SECOND_SOURCE_WINS:
        precedence = Precedence(secondary_sources)

    log.info("Resolving %d tokens with policy %s", len(tokens), policy)
    resolved: dict[str, Token] = {}
    conflicts = 0

    for token in tokens:
        existing = resolved.get(token.name)
        if existing is None:
            resolved[token.name] = token
            continue

        conflicts += 1
        if policy is ConflictPolicy.THROW_ON_CONFLICT:
            raise TokenConflictError(token.name, existing.source, token.source)
        if precedence is None or precedence.prefers(token.source, existing.source):
            resolved[token.name] = token
        log.debug(
            "Conflict on %r: %s vs %s, kept %s",
            token.name,
            existing.source,
            token.source,
            resolved[token.name].source,
        )

    log.info(
        "Resolved to %d unique tokens (%d conflicts)", len(resolved), conflicts
    )
    return list(resolved.values())


def find_conflicts(tokens: Sequence[Token]) -> dict[str, list[TokenSource]]:
    """Return every name that occurs more than once, mapped to its sources in input order."""
    seen: dict[str, list[TokenSource]] = {}
    for token in tokens:
        seen.setdefault(token.name, []).append(token.source)
    return {name: sources for name, sources in seen.items() if len(sources) > 1}
