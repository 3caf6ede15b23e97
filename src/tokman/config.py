"""Configuration: frozen dataclasses loaded from ``tokman.config.json``."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from tokman.errors import ConfigError, InvalidPolicyError
from tokman.figma.client import DEFAULT_TIMEOUT, FIGMA_API_BASE_URL
from tokman.model.token import TokenSource
from tokman.normalize.naming import DEFAULT_SEPARATOR
from tokman.resolution.policy import (
    DEFAULT_PRIMARY_SOURCES,
    DEFAULT_SECONDARY_SOURCES,
    ConflictPolicy,
    parse_policy,
)

CONFIG_FILE_NAME = "tokman.config.json"

FORMATTERS = ("json", "css", "scss")


@dataclass(frozen=True)
class FigmaConfig:
    api_key: str = ""
    file_key: str = ""
    base_url: str = FIGMA_API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    process_styles: bool = True

    @property
    def enabled(self) -> bool:
        return bool(self.file_key)


@dataclass(frozen=True)
class OutputConfig:
    formatter: str  # "json", "css" or "scss"
    path: str
    options: dict[str, Any] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class TokmanConfig:
    figma: FigmaConfig = field(default_factory=FigmaConfig)
    css_paths: tuple[str, ...] = ()
    outputs: tuple[OutputConfig, ...] = (
        OutputConfig(formatter="json", path="dist/tokens.json"),
    )
    conflict_policy: ConflictPolicy = ConflictPolicy.FIRST_SOURCE_WINS
    primary_sources: tuple[TokenSource, ...] = DEFAULT_PRIMARY_SOURCES
    secondary_sources: tuple[TokenSource, ...] = DEFAULT_SECONDARY_SOURCES
    separator: str = DEFAULT_SEPARATOR


def _expect(data: Mapping[str, Any], key: str, kind: type | tuple[type, ...], where: str) -> Any:
    value = data[key]
    if not isinstance(value, kind) or (kind is not bool and isinstance(value, bool)):
        raise ConfigError(f"{where}.{key} has the wrong type: {value!r}")
    return value


def _sources(values: Any, where: str) -> tuple[TokenSource, ...]:
    if not isinstance(values, list):
        raise ConfigError(f"{where} must be a list of source kinds")
    try:
        return tuple(TokenSource(v) for v in values)
    except ValueError as exc:
        raise ConfigError(f"{where}: {exc}") from exc


def _figma_from_dict(data: Any) -> FigmaConfig:
    if not isinstance(data, dict):
        raise ConfigError("figma must be an object")
    kwargs: dict[str, Any] = {}
    for key, attr in (("apiKey", "api_key"), ("fileKey", "file_key"), ("baseUrl", "base_url")):
        if key in data:
            kwargs[attr] = _expect(data, key, str, "figma")
    if "timeout" in data:
        kwargs["timeout"] = float(_expect(data, "timeout", (int, float), "figma"))
    if "processStyles" in data:
        kwargs["process_styles"] = _expect(data, "processStyles", bool, "figma")
    return FigmaConfig(**kwargs)


def _output_from_dict(data: Any) -> OutputConfig:
    if not isinstance(data, dict) or "formatter" not in data or "path" not in data:
        raise ConfigError("each output needs a formatter and a path")
    formatter = _expect(data, "formatter", str, "output")
    if formatter not in FORMATTERS:
        raise ConfigError(f"unknown formatter {formatter!r} (expected one of {', '.join(FORMATTERS)})")
    options = data.get("options", {})
    if not isinstance(options, dict):
        raise ConfigError("output.options must be an object")
    return OutputConfig(formatter=formatter, path=_expect(data, "path", str, "output"), options=options)


def config_from_dict(data: Mapping[str, Any]) -> TokmanConfig:
    """Build a :class:`TokmanConfig` from a decoded JSON document."""
    if not isinstance(data, Mapping):
        raise ConfigError("configuration must be a JSON object")
    kwargs: dict[str, Any] = {}
    if "figma" in data:
        kwargs["figma"] = _figma_from_dict(data["figma"])
    if "css" in data:
        paths = data["css"]
        if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
            raise ConfigError("css must be a list of paths")
        kwargs["css_paths"] = tuple(paths)
    if "output" in data:
        outputs = data["output"]
        if not isinstance(outputs, list):
            raise ConfigError("output must be a list")
        kwargs["outputs"] = tuple(_output_from_dict(o) for o in outputs)
    if "conflictResolution" in data:
        try:
            kwargs["conflict_policy"] = parse_policy(data["conflictResolution"])
        except InvalidPolicyError as exc:
            raise ConfigError(str(exc)) from exc
    if "primarySources" in data:
        kwargs["primary_sources"] = _sources(data["primarySources"], "primarySources")
    if "secondarySources" in data:
        kwargs["secondary_sources"] = _sources(data["secondarySources"], "secondarySources")
    if "separator" in data:
        kwargs["separator"] = _expect(data, "separator", str, "config")
    return TokmanConfig(**kwargs)


def apply_environment(config: TokmanConfig, environ: Mapping[str, str] | None = None) -> TokmanConfig:
    """Fill missing Figma credentials from ``FIGMA_API_KEY`` / ``FIGMA_FILE_KEY``."""
    env = os.environ if environ is None else environ
    figma = config.figma
    if not figma.api_key and env.get("FIGMA_API_KEY"):
        figma = replace(figma, api_key=env["FIGMA_API_KEY"])
    if not figma.file_key and env.get("FIGMA_FILE_KEY"):
        figma = replace(figma, file_key=env["FIGMA_FILE_KEY"])
    return replace(config, figma=figma)


def load_config(
    path: str | Path | None = None, environ: Mapping[str, str] | None = None
) -> TokmanConfig:
    """Load configuration from *path* (default ``./tokman.config.json``).

    A missing default file yields the defaults; a missing explicit path,
    invalid JSON or a malformed document raises :class:`ConfigError`.
    """
    explicit = path is not None
    config_path = Path(path) if explicit else Path(CONFIG_FILE_NAME)
    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Configuration file not found: {config_path}")
        return apply_environment(TokmanConfig(), environ)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{config_path}: invalid JSON ({exc})") from exc
    return apply_environment(config_from_dict(data), environ)


def sample_config() -> dict[str, Any]:
    """The document written by ``tokman init``."""
    return {
        "figma": {"fileKey": "YOUR_FIGMA_FILE_KEY", "processStyles": True},
        "css": ["styles/tokens.css"],
        "output": [
            {"formatter": "json", "path": "dist/tokens.json"},
            {"formatter": "css", "path": "dist/tokens.css", "options": {"selector": ":root"}},
            {
                "formatter": "scss",
                "path": "dist/_tokens.scss",
                "options": {"generateMap": True, "mapName": "tokens"},
            },
        ],
        "conflictResolution": "firstSourceWins",
        "separator": "-",
    }
