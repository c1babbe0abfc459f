"""Where and how a report is written.

A destination is either stdout or a file path. Nothing here opens the file;
the renderer does that when it is ready to write.
"""
from __future__ import annotations

import enum
from pathlib import Path
from typing import Annotated, Literal, TypeAlias

from pydantic import Field
from typing_extensions import override

from sprig.config import Config, ValidationType
from sprig.errors import UnrecognizedFormat


STDOUT_TOKEN = "-"


class OutputFormat(str, enum.Enum):
    """Rendering modes for a report.

    TEXT: Human-readable tables and trees
    JSON: Machine-readable JSON document
    CSV: Comma-separated rows
    """

    TEXT = "text"
    JSON = "json"
    CSV = "csv"

    @classmethod
    def parse(cls, token: str) -> "OutputFormat":
        """Match a token against the recognized formats (case-sensitive)."""
        try:
            return cls(token)
        except ValueError:
            raise UnrecognizedFormat(
                str(token), tuple(f.value for f in cls)
            ) from None

    @classmethod
    def default(cls) -> "OutputFormat":
        return cls.TEXT


class DestinationKind(str, enum.Enum):
    STDOUT = "stdout"
    FILE = "file"


class StdoutDestination(Config):
    """Write the report to standard output."""

    kind: Literal[DestinationKind.STDOUT] = DestinationKind.STDOUT

    @override
    def __str__(self) -> str:
        return STDOUT_TOKEN


class FileDestination(Config):
    """Write the report to a file, created or truncated by the renderer."""

    kind: Literal[DestinationKind.FILE] = DestinationKind.FILE
    path: Path

    @override
    def __str__(self) -> str:
        return str(self.path)


OutputDestination: TypeAlias = Annotated[
    StdoutDestination | FileDestination,
    Field(discriminator="kind"),
]


def parse_destination(token: str) -> StdoutDestination | FileDestination:
    """Resolve a sink token: "-" is stdout, anything else is a file path.

    The path is not checked for existence.
    """
    Config.check(token, ValidationType.SHOULD_BE_NON_EMPTY)
    if token == STDOUT_TOKEN:
        return StdoutDestination()
    return FileDestination(path=Path(token))


def default_destination() -> StdoutDestination:
    return StdoutDestination()
