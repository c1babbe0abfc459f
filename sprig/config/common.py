"""Fields shared by every profiling mode.

Each mode reads one input binary and writes one report, so the input path,
the destination and the format live here. Mode-specific knobs live in the
subclasses.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar

from pydantic import Field, field_validator
from typing_extensions import Self

from sprig.config import Config, ValidationType
from sprig.config.mode import Mode
from sprig.config.output import (
    OutputDestination,
    OutputFormat,
    StdoutDestination,
    FileDestination,
    default_destination,
    parse_destination,
)
from sprig.errors import MalformedArgument


class ModeConfig(Config):
    """Base for the per-mode configurations.

    `input` is unset on a fresh config; a request cannot be dispatched until
    it is set (see `sprig.command`).
    """

    mode: ClassVar[Mode]

    input: Path | None = None
    output_destination: OutputDestination = Field(default_factory=default_destination)
    output_format: OutputFormat = OutputFormat.TEXT

    @classmethod
    def new(cls) -> Self:
        """Construct a config with every field at its default."""
        return cls()

    @field_validator("input", mode="before")
    @classmethod
    def reject_empty_input(cls, value: object) -> object:
        # Path("") would become Path("."), so check the raw token.
        if isinstance(value, (str, os.PathLike)):
            Config.check(os.fspath(value), ValidationType.SHOULD_BE_NON_EMPTY)
        return value

    @field_validator("output_destination", mode="before")
    @classmethod
    def coerce_destination(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_destination(value)
        return value

    @field_validator("output_format", mode="before")
    @classmethod
    def coerce_format(cls, value: object) -> object:
        if isinstance(value, str):
            return OutputFormat.parse(value)
        return value

    def set_input(self, input: str | os.PathLike[str]) -> None:
        """Set the path to the binary to profile."""
        if not isinstance(input, (str, os.PathLike)):
            raise MalformedArgument(f"input must be a path, got {input!r}")
        Config.check(os.fspath(input), ValidationType.SHOULD_BE_NON_EMPTY)
        self.input = Path(input)

    def set_output_destination(
        self, destination: str | StdoutDestination | FileDestination
    ) -> None:
        """Set where the report goes; "-" means stdout."""
        if isinstance(destination, str):
            destination = parse_destination(destination)
        self.output_destination = destination

    def set_output_format(self, output_format: str | OutputFormat) -> None:
        """Set the report format.

        Raises UnrecognizedFormat and keeps the previous format when the
        token is not recognized.
        """
        self.output_format = OutputFormat.parse(output_format)

    def summary(self) -> dict[str, str]:
        """Display strings for every effective setting, in a stable order."""
        return {
            "input": str(self.input) if self.input is not None else "(unset)",
            "output": str(self.output_destination),
            "format": self.output_format.value,
        }


def describe_bound(bound: int | None) -> str:
    """Display string for an optional limit."""
    return "unbounded" if bound is None else str(bound)
