"""CLI command: tokman inspect -- display resolved tokens without writing."""

from __future__ import annotations

import sys

import click

from tokman.cli.common import configure_logging, echo_diagnostics, effective_config, source_options
from tokman.errors import TokmanError
from tokman.figma.errors import FigmaError
from tokman.formatters.values import to_css_value
from tokman.pipeline import build_tokens, close_sources, sources_from_config


@click.command()
@source_options
def inspect(
    config_path: str | None,
    file_key: str | None,
    css_paths: tuple[str, ...],
    policy: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Resolve tokens from the configured sources and list them.

    Shows name, type, source and value for every token; placeholders are
    listed as NEEDS NODE DATA.
    """
    configure_logging(verbose, quiet)
    sources = []
    try:
        config = effective_config(config_path, file_key, css_paths, policy)
        sources = sources_from_config(config)
        result = build_tokens(sources, config)
    except (TokmanError, FigmaError, OSError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    finally:
        close_sources(sources)

    echo_diagnostics(result.diagnostics, verbose)
    click.echo(f"Tokens: {len(result.tokens)}")
    for token in result.tokens:
        if token.needs_node_data:
            value = "NEEDS NODE DATA"
        else:
            value = to_css_value(token.value)
        parts = [f"  {token.name}", f"type={token.type}", f"source={token.source}", value]
        if token.values_by_mode:
            parts.append(f"modes={','.join(token.modes)}")
        click.echo("  ".join(parts))
