"""Typed command payloads.

Each command type wraps one fully built mode configuration. The CLI, the
host builders and request files all produce these, and the analysis side
dispatches on the variant with a single match.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from sprig.config.common import ModeConfig
from sprig.config.dominators import DominatorsConfig
from sprig.config.mode import Mode
from sprig.config.paths import PathsConfig
from sprig.config.top import TopConfig
from sprig.errors import MissingRequiredInput


C = TypeVar("C", bound=ModeConfig)


def _seal(config: C) -> C:
    """Check a config is complete and detach it from its builder."""
    if config.input is None:
        raise MissingRequiredInput(config.mode.value)
    return config.model_copy(deep=True)


@dataclass(frozen=True, slots=True)
class TopCommand:
    """Request to list the top code size offenders."""

    config: TopConfig

    def __post_init__(self) -> None:
        object.__setattr__(self, "config", _seal(self.config))

    @property
    def mode(self) -> Mode:
        return Mode.TOP


@dataclass(frozen=True, slots=True)
class DominatorsCommand:
    """Request to display the dominator tree."""

    config: DominatorsConfig

    def __post_init__(self) -> None:
        object.__setattr__(self, "config", _seal(self.config))

    @property
    def mode(self) -> Mode:
        return Mode.DOMINATORS


@dataclass(frozen=True, slots=True)
class PathsCommand:
    """Request to display call paths to a set of functions."""

    config: PathsConfig

    def __post_init__(self) -> None:
        object.__setattr__(self, "config", _seal(self.config))

    @property
    def mode(self) -> Mode:
        return Mode.PATHS


Command = TopCommand | DominatorsCommand | PathsCommand


def command_for(config: ModeConfig) -> Command:
    """Wrap a mode configuration in its command variant."""
    match config:
        case TopConfig():
            return TopCommand(config)
        case DominatorsConfig():
            return DominatorsCommand(config)
        case PathsConfig():
            return PathsCommand(config)
        case _:
            raise TypeError(f"Unsupported configuration: {type(config)!r}")
