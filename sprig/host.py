"""Builders for embedding hosts.

A host that cannot pass Python objects around (a plugin runtime, an FFI
layer) builds a request one call at a time: create a default builder, call
setters with plain strings, ints and bools, then take the command. Getters
return effective values, so an unset limit reads as U32_MAX.

Lists never cross this boundary. `Paths.add_function` is the only way to
populate the function list.
"""
from __future__ import annotations

import os
from typing import Generic, TypeVar

from sprig.command import Command, command_for
from sprig.config.common import ModeConfig
from sprig.config.dominators import DominatorsConfig
from sprig.config.paths import PathsConfig
from sprig.config.top import TopConfig


C = TypeVar("C", bound=ModeConfig)


class _Builder(Generic[C]):
    """Accessors and mutators shared by every mode."""

    config_type: type[C]

    def __init__(self) -> None:
        self._config: C = self.config_type.new()

    def input(self) -> str:
        """The path to the input binary, or "" while unset."""
        return "" if self._config.input is None else str(self._config.input)

    def set_input(self, input: str | os.PathLike[str]) -> None:
        self._config.set_input(input)

    def output_destination(self) -> str:
        """The destination token: "-" for stdout, else the file path."""
        return str(self._config.output_destination)

    def set_output_destination(self, destination: str) -> None:
        self._config.set_output_destination(destination)

    def output_format(self) -> str:
        return self._config.output_format.value

    def set_output_format(self, output_format: str) -> None:
        """Raises UnrecognizedFormat; the previous format is kept."""
        self._config.set_output_format(output_format)

    def config(self) -> C:
        """A copy of the configuration built so far."""
        return self._config.model_copy(deep=True)

    def command(self) -> Command:
        """Wrap the configuration for dispatch.

        Raises MissingRequiredInput if no input was set. Later calls on this
        builder do not affect the returned command.
        """
        return command_for(self._config)


class Top(_Builder[TopConfig]):
    """List the top code size offenders in a binary."""

    config_type = TopConfig

    def number(self) -> int:
        """The maximum number of items to display."""
        return self._config.effective_number

    def set_number(self, n: int) -> None:
        self._config.set_number(n)

    def retaining_paths(self) -> bool:
        return self._config.retaining_paths

    def set_retaining_paths(self, do_it: bool) -> None:
        self._config.set_retaining_paths(do_it)

    def retained(self) -> bool:
        """Sort list by retained size, rather than shallow size."""
        return self._config.retained

    def set_retained(self, do_it: bool) -> None:
        self._config.set_retained(do_it)


class Dominators(_Builder[DominatorsConfig]):
    """Compute and display the dominator tree for a binary's call graph."""

    config_type = DominatorsConfig

    def max_depth(self) -> int:
        return self._config.effective_max_depth

    def set_max_depth(self, max_depth: int) -> None:
        self._config.set_max_depth(max_depth)

    def max_rows(self) -> int:
        return self._config.effective_max_rows

    def set_max_rows(self, max_rows: int) -> None:
        self._config.set_max_rows(max_rows)


class Paths(_Builder[PathsConfig]):
    """Find and display the call paths to functions in a binary's call graph."""

    config_type = PathsConfig

    def add_function(self, function: str) -> None:
        """Add a function to find call paths for."""
        self._config.add_function(function)

    def max_depth(self) -> int:
        return self._config.max_depth

    def set_max_depth(self, max_depth: int) -> None:
        self._config.set_max_depth(max_depth)

    def max_paths(self) -> int:
        return self._config.max_paths

    def set_max_paths(self, max_paths: int) -> None:
        self._config.set_max_paths(max_paths)
