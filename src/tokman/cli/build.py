"""CLI command: tokman build -- fetch, transform, resolve and write tokens."""

from __future__ import annotations

import sys

import click

from tokman.cli.common import configure_logging, echo_diagnostics, effective_config, source_options
from tokman.errors import TokmanError
from tokman.figma.errors import FigmaError
from tokman.model.diagnostic import Severity
from tokman.pipeline import build_tokens, close_sources, sources_from_config, write_outputs


@click.command()
@source_options
@click.option(
    "--out-dir",
    type=click.Path(file_okay=False),
    default=".",
    help="Directory that output paths are relative to",
)
@click.option("--strict", is_flag=True, help="Fail if any style could not be resolved")
def build(
    config_path: str | None,
    file_key: str | None,
    css_paths: tuple[str, ...],
    policy: str | None,
    verbose: bool,
    quiet: bool,
    out_dir: str,
    strict: bool,
) -> None:
    """Fetch, transform, resolve and write design tokens.

    Exits with code 1 on configuration, network or conflict errors, and with
    --strict when placeholder tokens remain.
    """
    configure_logging(verbose, quiet)
    sources = []
    try:
        config = effective_config(config_path, file_key, css_paths, policy)
        sources = sources_from_config(config)
        if not sources:
            click.echo("Error: no sources configured (set a Figma file key or --css)", err=True)
            sys.exit(1)
        result = build_tokens(sources, config)
        paths = write_outputs(result.tokens, config.outputs, out_dir)
    except (TokmanError, FigmaError, OSError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    finally:
        close_sources(sources)

    echo_diagnostics(result.diagnostics, verbose)

    warnings = [d for d in result.diagnostics if d.severity is Severity.WARNING]
    click.echo(
        f"Built {len(result.tokens)} tokens from {result.collected_count} collected "
        f"({len(warnings)} warning(s))"
    )
    for path in paths:
        click.echo(f"  wrote {path}")

    if strict and result.placeholders:
        click.echo(
            f"Error: {len(result.placeholders)} token(s) need node data (--strict)", err=True
        )
        sys.exit(1)
