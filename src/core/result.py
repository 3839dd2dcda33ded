"""Result types for railway-oriented programming.

Every pipeline stage (parse, validate, schedule, execute) reports failure by
returning a value instead of raising. Callers branch on the result type.

Usage:
    def parse_amount(raw: str) -> Result[int, ValidationError]:
        if not raw.isdigit():
            return Failure(error=ValidationError(...))
        return Success(value=int(raw))

    match parse_amount("500"):
        case Success(value=amount):
            print(f"Amount: {amount}")
        case Failure(error=error):
            print(f"Rejected: {error.code.value}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful stage outcome.

    Attributes:
        value: The stage output (draft transfer, executed transfer, etc.).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed stage outcome.

    Attributes:
        error: The error value describing why the stage stopped.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
