"""Base types shared by the record-to-token transformers."""

from __future__ import annotations

from dataclasses import dataclass, field

from tokman.model.diagnostic import Diagnostic, Severity
from tokman.model.token import Token


@dataclass
class TransformResult:
    """Tokens produced from a batch of source records, plus skip/warning diagnostics."""

    tokens: list[Token] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def extend(self, other: TransformResult) -> None:
        self.tokens.extend(other.tokens)
        self.diagnostics.extend(other.diagnostics)

    def skip(self, code: str, message: str, name: str | None, source: str) -> None:
        """Record an INFO diagnostic for a dropped record."""
        self.diagnostics.append(Diagnostic(code, Severity.INFO, message, name, source))

    def warn(self, code: str, message: str, name: str | None, source: str) -> None:
        self.diagnostics.append(Diagnostic(code, Severity.WARNING, message, name, source))

    @property
    def placeholders(self) -> list[Token]:
        return [t for t in self.tokens if t.needs_node_data]
