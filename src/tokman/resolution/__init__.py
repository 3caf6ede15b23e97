from tokman.resolution.policy import ConflictPolicy, Precedence, parse_policy
from tokman.resolution.resolver import find_conflicts, resolve_conflicts

__all__ = [
    "ConflictPolicy",
    "Precedence",
    "parse_policy",
    "find_conflicts",
    "resolve_conflicts",
]
