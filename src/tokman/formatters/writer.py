"""Write formatted tokens to disk according to :class:`OutputConfig` entries."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from tokman.config import OutputConfig
from tokman.errors import ConfigError
from tokman.formatters.css import format_css, format_scss
from tokman.formatters.json_formatter import render_json
from tokman.model.token import Token

log = logging.getLogger("tokman.formatters")


def render(tokens: Sequence[Token], output: OutputConfig) -> str:
    """Render *tokens* with the formatter named by *output*."""
    opts = output.options
    if output.formatter == "json":
        return render_json(tokens, include_modes=opts.get("includeModes", True))
    if output.formatter == "css":
        return format_css(
            tokens,
            selector=opts.get("selector", ":root"),
            mode_selector=opts.get("modeSelector"),
        )
    if output.formatter == "scss":
        return format_scss(
            tokens,
            generate_map=opts.get("generateMap", False),
            map_name=opts.get("mapName", "tokens"),
        )
    raise ConfigError(f"Unknown formatter: {output.formatter!r}")


def write_output(tokens: Sequence[Token], output: OutputConfig, base_dir: str | Path = ".") -> Path:
    """Render and write one output file, creating parent directories."""
    path = Path(base_dir) / output.path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render(tokens, output), encoding="utf-8")
    log.info("Wrote %s output to %s", output.formatter, path)
    return path
