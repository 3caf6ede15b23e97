"""Pipeline: sources -> transformers -> conflict resolver -> formatters."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from tokman.config import OutputConfig, TokmanConfig
from tokman.formatters.writer import write_output
from tokman.model.diagnostic import Diagnostic
from tokman.model.token import Token
from tokman.resolution.resolver import resolve_conflicts
from tokman.sources.base import SourceAdapter
from tokman.transforms.base import TransformResult

log = logging.getLogger("tokman.pipeline")


@dataclass
class BuildResult:
    """Resolved tokens plus every diagnostic collected from the sources."""

    tokens: list[Token] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    collected_count: int = 0

    @property
    def placeholders(self) -> list[Token]:
        return [t for t in self.tokens if t.needs_node_data]


def collect(sources: Sequence[SourceAdapter], config: TokmanConfig) -> TransformResult:
    """Load every source in order and concatenate their results."""
    combined = TransformResult()
    for source in sources:
        log.info("Loading %s source", source.kind)
        combined.extend(source.load(config))
    return combined


def build_tokens(sources: Sequence[SourceAdapter], config: TokmanConfig) -> BuildResult:
    """Collect tokens from *sources* and resolve name conflicts."""
    collected = collect(sources, config)
    tokens = resolve_conflicts(
        collected.tokens,
        config.conflict_policy,
        primary_sources=config.primary_sources,
        secondary_sources=config.secondary_sources,
    )
    return BuildResult(
        tokens=tokens,
        diagnostics=collected.diagnostics,
        collected_count=len(collected.tokens),
    )


def write_outputs(
    tokens: Sequence[Token], outputs: Sequence[OutputConfig], base_dir: str | Path = "."
) -> list[Path]:
    """Write every configured output and return the written paths."""
    return [write_output(tokens, output, base_dir) for output in outputs]


def sources_from_config(config: TokmanConfig) -> list[SourceAdapter]:
    """Build the configured sources: Figma first (if a file key is set), then stylesheets."""
    from tokman.sources import FigmaSource, StylesheetSource

    sources: list[SourceAdapter] = []
    if config.figma.enabled:
        sources.append(FigmaSource.from_config(config))
    if config.css_paths:
        sources.append(StylesheetSource(config.css_paths))
    return sources


def close_sources(sources: Sequence[SourceAdapter]) -> None:
    for source in sources:
        close = getattr(source, "close", None)
        if close is not None:
            close()
