"""Hand a command to the analysis engine.

The engine itself lives outside this package. Anything with the three
methods of `Analysis` can be plugged in.
"""
from __future__ import annotations

from typing import Protocol

from sprig.command import Command, DominatorsCommand, PathsCommand, TopCommand
from sprig.config.dominators import DominatorsConfig
from sprig.config.paths import PathsConfig
from sprig.config.top import TopConfig


class Analysis(Protocol):
    """The analysis engine, one method per profiling mode."""

    def top(self, config: TopConfig) -> object:
        ...

    def dominators(self, config: DominatorsConfig) -> object:
        ...

    def paths(self, config: PathsConfig) -> object:
        ...


def dispatch(command: Command, analysis: Analysis) -> object:
    """Run the analysis matching the command variant and return its result."""
    match command:
        case TopCommand(config=config):
            return analysis.top(config)
        case DominatorsCommand(config=config):
            return analysis.dominators(config)
        case PathsCommand(config=config):
            return analysis.paths(config)
        case _:
            raise ValueError(f"Invalid command payload: {type(command)!r}")
