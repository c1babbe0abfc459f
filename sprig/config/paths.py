"""Paths: the call paths leading to chosen functions.

Unlike the other modes, both limits here have finite defaults, since an
unbounded path search over a large call graph rarely finishes.
"""
from __future__ import annotations

from typing import ClassVar

from sprig.config import U32, Config
from sprig.config.common import ModeConfig
from sprig.config.mode import Mode
from sprig.errors import MalformedArgument


DEFAULT_MAX_DEPTH = 10
DEFAULT_MAX_PATHS = 10


class PathsConfig(ModeConfig):
    """Find and display the call paths to a function in a binary's call graph.

    `functions` keeps insertion order and only grows, one name at a time,
    through `add_function`. An empty list is accepted here; the analysis
    decides what to do with it.
    """

    mode: ClassVar[Mode] = Mode.PATHS

    functions: tuple[str, ...] = ()
    max_depth: U32 = DEFAULT_MAX_DEPTH
    max_paths: U32 = DEFAULT_MAX_PATHS

    def add_function(self, function: str) -> None:
        """Add a function to find call paths for."""
        if not isinstance(function, str):
            raise MalformedArgument(f"function name must be a string, got {function!r}")
        self.functions = (*self.functions, function)

    def set_max_depth(self, max_depth: int) -> None:
        self.max_depth = Config.check_u32(max_depth, "max_depth")

    def set_max_paths(self, max_paths: int) -> None:
        self.max_paths = Config.check_u32(max_paths, "max_paths")

    def summary(self) -> dict[str, str]:
        return {
            **super().summary(),
            "functions": ", ".join(self.functions) if self.functions else "(none)",
            "max depth": str(self.max_depth),
            "max paths": str(self.max_paths),
        }
