"""Dominators: the dominator tree of a binary's call graph.

Both limits are optional; an unset limit prints the whole tree.
"""
from __future__ import annotations

from typing import ClassVar

from sprig.config import U32, Config, resolve_bound
from sprig.config.common import ModeConfig, describe_bound
from sprig.config.mode import Mode


class DominatorsConfig(ModeConfig):
    """Compute and display the dominator tree for a binary's call graph."""

    mode: ClassVar[Mode] = Mode.DOMINATORS

    max_depth: U32 | None = None
    max_rows: U32 | None = None

    @property
    def effective_max_depth(self) -> int:
        """The maximum depth to print the dominators tree."""
        return resolve_bound(self.max_depth)

    @property
    def effective_max_rows(self) -> int:
        """The maximum number of rows, regardless of depth in the tree."""
        return resolve_bound(self.max_rows)

    def set_max_depth(self, max_depth: int) -> None:
        self.max_depth = Config.check_u32(max_depth, "max_depth")

    def set_max_rows(self, max_rows: int) -> None:
        self.max_rows = Config.check_u32(max_rows, "max_rows")

    def summary(self) -> dict[str, str]:
        return {
            **super().summary(),
            "max depth": describe_bound(self.max_depth),
            "max rows": describe_bound(self.max_rows),
        }
