"""Profiling modes: which analysis a request asks for.

Each mode has its own configuration model and command variant.
"""
from __future__ import annotations

import enum


class Mode(enum.Enum):
    """Which analysis to run.

    TOP: List the largest items, by shallow or retained size
    DOMINATORS: Display the dominator tree of the call graph
    PATHS: Display the call paths leading to given functions
    """

    TOP = "top"
    DOMINATORS = "dominators"
    PATHS = "paths"
