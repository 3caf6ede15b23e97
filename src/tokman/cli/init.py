"""CLI command: tokman init -- write a sample configuration file."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from tokman.config import CONFIG_FILE_NAME, sample_config


@click.command()
@click.argument("path", type=click.Path(dir_okay=False), default=CONFIG_FILE_NAME)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init(path: str, force: bool) -> None:
    """Create a sample configuration file."""
    target = Path(path)
    if target.exists() and not force:
        click.echo(f"Error: {target} already exists (use --force to overwrite)", err=True)
        sys.exit(1)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(sample_config(), indent=2) + "\n", encoding="utf-8")
    click.echo(f"Wrote sample configuration to {target}")
    click.echo("Set FIGMA_API_KEY in your environment before running `tokman build`.")
