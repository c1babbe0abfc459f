"""Configuration system: validated models for profiling requests.

Every request, whether it comes from the command line, an embedding host or
a request file, ends up as one of the pydantic models in this package. The
models carry the defaults, so no construction path can drift from another.
"""
from __future__ import annotations

import enum
from typing import Annotated, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict

from sprig.errors import MalformedArgument


T = TypeVar("T")

# Largest value of an unsigned 32-bit count. Unset limits resolve to this so
# consumers never special-case "no limit".
U32_MAX = 2**32 - 1


class ValidationType(enum.Enum):
    """Types of value validation we support."""

    SHOULD_BE_NON_NEGATIVE = "should_be_non_negative"
    SHOULD_BE_AT_MOST = "should_be_at_most"
    SHOULD_BE_NON_EMPTY = "should_be_non_empty"


class Config(BaseModel):
    """Base class for all configuration objects.

    Assignments are validated, and unknown fields are rejected so that a
    typo in a request file fails loudly instead of being ignored.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    @staticmethod
    def check(left: T, validation_type: ValidationType, right: T | None = None) -> T:
        """Validate a value against a constraint, raising MalformedArgument on failure."""
        match validation_type:
            case ValidationType.SHOULD_BE_NON_NEGATIVE:
                if left < 0:  # type: ignore[operator]
                    raise MalformedArgument(
                        f"Validation failed: {validation_type.name}: {left!r} < 0"
                    )
                return left
            case ValidationType.SHOULD_BE_AT_MOST:
                if left > right:  # type: ignore[operator]
                    raise MalformedArgument(
                        f"Validation failed: {validation_type.name}: "
                        f"{left!r} > {right!r}"
                    )
                return left
            case ValidationType.SHOULD_BE_NON_EMPTY:
                if not left:
                    raise MalformedArgument(
                        f"Validation failed: {validation_type.name}: "
                        f"value={left!r} is empty"
                    )
                return left
            case _:
                raise MalformedArgument(
                    f"Validation failed: unknown validation type {validation_type}"
                )

    @staticmethod
    def check_u32(value: object, name: str = "value") -> int:
        """Validate that a value fits an unsigned 32-bit count."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise MalformedArgument(
                f"{name} must be an unsigned integer, got {value!r}"
            )
        Config.check(value, ValidationType.SHOULD_BE_NON_NEGATIVE)
        Config.check(value, ValidationType.SHOULD_BE_AT_MOST, U32_MAX)
        return value

    @staticmethod
    def check_flag(value: object, name: str = "value") -> bool:
        """Validate that a value is a real bool, not something truthy."""
        if not isinstance(value, bool):
            raise MalformedArgument(f"{name} must be true or false, got {value!r}")
        return value


def resolve_bound(bound: int | None) -> int:
    """Return the effective value of an optional limit.

    An unset limit means "unbounded", which is reported as U32_MAX.
    """
    return U32_MAX if bound is None else bound


# Type alias for validated counts; use this in config models
U32 = Annotated[int, AfterValidator(lambda v: Config.check_u32(v))]
