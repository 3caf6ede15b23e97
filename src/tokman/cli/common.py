"""Options and helpers shared by the build and inspect commands."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from typing import Any

import click

from tokman.config import TokmanConfig, load_config
from tokman.errors import ConfigError, InvalidPolicyError
from tokman.model.diagnostic import Diagnostic, Severity
from tokman.resolution.policy import ConflictPolicy, POLICY_ALIASES, parse_policy

POLICY_CHOICES = [p.value for p in ConflictPolicy] + list(POLICY_ALIASES)


_SOURCE_OPTIONS = [
    click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False),
        default=None,
        help="Path to configuration file (default: ./tokman.config.json)",
    ),
    click.option("--file-key", default=None, help="Figma file key (overrides config)"),
    click.option(
        "--css",
        "css_paths",
        multiple=True,
        type=click.Path(exists=True, dir_okay=False),
        help="Stylesheet to read custom properties from (repeatable, overrides config)",
    ),
    click.option(
        "--policy",
        type=click.Choice(POLICY_CHOICES),
        default=None,
        help="Conflict resolution policy (overrides config)",
    ),
    click.option("-v", "--verbose", is_flag=True, help="Enable debug logging"),
    click.option("--quiet", is_flag=True, help="Only log errors"),
]


def source_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the --config/--file-key/--css/--policy/-v/--quiet options."""
    for option in reversed(_SOURCE_OPTIONS):
        func = option(func)
    return func


def configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def effective_config(
    config_path: str | None,
    file_key: str | None,
    css_paths: tuple[str, ...],
    policy: str | None,
) -> TokmanConfig:
    """Load the config file and apply command-line overrides."""
    config = load_config(config_path)
    if file_key:
        config = replace(config, figma=replace(config.figma, file_key=file_key))
    if css_paths:
        config = replace(config, css_paths=tuple(css_paths))
    if policy:
        try:
            config = replace(config, conflict_policy=parse_policy(policy))
        except InvalidPolicyError as exc:
            raise ConfigError(str(exc)) from exc
    return config


def echo_diagnostics(diagnostics: list[Diagnostic], verbose: bool = False) -> None:
    """Print WARNING and ERROR diagnostics (and INFO ones with *verbose*) to stderr."""
    for diag in diagnostics:
        if diag.severity is Severity.INFO and not verbose:
            continue
        click.echo(str(diag), err=True)
