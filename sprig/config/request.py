"""Request files: a profiling run described in YAML or JSON.

A request file is a mapping with a `mode` key plus the fields of that mode:

    mode: paths
    input: ./app.wasm
    functions: [alloc, dealloc]
    max_depth: 4
    output_format: json
    output_destination: paths.json

Omitted fields take the same defaults as the command line.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from sprig.command import Command, command_for
from sprig.config.common import ModeConfig
from sprig.config.dominators import DominatorsConfig
from sprig.config.mode import Mode
from sprig.config.paths import PathsConfig
from sprig.config.top import TopConfig
from sprig.errors import MalformedArgument, OptionsError


MODE_CONFIGS: dict[Mode, type[ModeConfig]] = {
    Mode.TOP: TopConfig,
    Mode.DOMINATORS: DominatorsConfig,
    Mode.PATHS: PathsConfig,
}


def read_payload(path: Path) -> dict[str, Any]:
    """Load a JSON or YAML request file into a dict."""
    text = path.read_text(encoding="utf-8")
    match path.suffix.lower():
        case ".json":
            payload = json.loads(text)
        case ".yml" | ".yaml":
            payload = yaml.safe_load(text)
        case s:
            raise MalformedArgument(f"Unsupported request format '{s}'")

    if payload is None:
        raise MalformedArgument(f"Request file is empty: {path}")
    if not isinstance(payload, dict):
        raise MalformedArgument(
            f"Request payload must be a mapping, got {type(payload)!r}"
        )
    return payload


def config_from_payload(payload: dict[str, Any]) -> ModeConfig:
    """Validate a request mapping into the config of its mode."""
    payload = dict(payload)
    raw_mode = payload.pop("mode", None)
    if raw_mode is None:
        raise MalformedArgument("Request is missing 'mode'")
    try:
        mode = Mode(raw_mode)
    except ValueError:
        choices = ", ".join(m.value for m in Mode)
        raise MalformedArgument(
            f"Unknown mode {raw_mode!r} (expected one of: {choices})"
        ) from None

    config_type = MODE_CONFIGS[mode]
    try:
        return config_type.model_validate(payload)
    except ValidationError as e:
        # Surface our own errors (e.g. UnrecognizedFormat) unwrapped.
        for error in e.errors():
            cause = error.get("ctx", {}).get("error")
            if isinstance(cause, OptionsError):
                raise cause from None
        raise MalformedArgument(f"Invalid {mode.value} request: {e}") from e


def load_command(path: Path) -> Command:
    """Load, validate and wrap a request file."""
    return command_for(config_from_payload(read_payload(path)))
