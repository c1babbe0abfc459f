"""Errors raised while building a profiling request.

All of them derive from ValueError so the entrypoint can treat them like
any other bad input, while callers that care can catch OptionsError.
"""
from __future__ import annotations


class OptionsError(ValueError):
    """Base class for request construction failures."""


class MissingRequiredInput(OptionsError):
    """No input binary was given."""

    def __init__(self, mode: str | None = None) -> None:
        self.mode = mode
        where = f" for '{mode}'" if mode else ""
        super().__init__(f"the input binary path is required{where}")


class UnrecognizedFormat(OptionsError):
    """The output format token is not one we can render."""

    def __init__(self, token: str, choices: tuple[str, ...] = ()) -> None:
        self.token = token
        self.choices = choices
        message = f"unrecognized output format {token!r}"
        if choices:
            message += f" (expected one of: {', '.join(choices)})"
        super().__init__(message)


class MalformedArgument(OptionsError):
    """A flag or field was given but its value could not be used."""
