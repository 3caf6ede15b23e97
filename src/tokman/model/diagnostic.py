"""Diagnostic model: structured records for skipped or incomplete source data."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single data-quality finding produced while transforming records.

    Attributes:
        code: Stable identifier for the kind of finding (e.g. ``no-modes``).
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        name: The source record or token name involved, if applicable.
        source: The source kind that produced the record, if applicable.
    """

    code: str
    severity: Severity
    message: str
    name: str | None = None
    source: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.source and self.name:
            location = f" [{self.source}:{self.name}]"
        elif self.name:
            location = f" [{self.name}]"
        return f"{self.severity.value}{location}: {self.message}"
