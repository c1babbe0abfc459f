"""Top: the largest items in a binary.

Lists code size offenders, sorted by shallow size unless retained size is
requested. Optionally shows the retaining path of each item.
"""
from __future__ import annotations

from typing import ClassVar

from sprig.config import U32, Config, resolve_bound
from sprig.config.common import ModeConfig, describe_bound
from sprig.config.mode import Mode


class TopConfig(ModeConfig):
    """List the top code size offenders in a binary."""

    mode: ClassVar[Mode] = Mode.TOP

    number: U32 | None = None
    retaining_paths: bool = False
    retained: bool = False

    @property
    def effective_number(self) -> int:
        """The maximum number of items to display."""
        return resolve_bound(self.number)

    def set_number(self, n: int) -> None:
        self.number = Config.check_u32(n, "number")

    def set_retaining_paths(self, do_it: bool) -> None:
        """Set whether to compute and display retaining paths."""
        self.retaining_paths = Config.check_flag(do_it, "retaining_paths")

    def set_retained(self, do_it: bool) -> None:
        """Set whether to sort by retained size rather than shallow size."""
        self.retained = Config.check_flag(do_it, "retained")

    def summary(self) -> dict[str, str]:
        return {
            **super().summary(),
            "number": describe_bound(self.number),
            "retaining paths": str(self.retaining_paths).lower(),
            "sort by": "retained size" if self.retained else "shallow size",
        }
