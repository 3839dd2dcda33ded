"""Base domain error class for Railway-Oriented Programming.

DomainError is the base class for every failure the payment instruction
pipeline can report. Errors flow through the pipeline as data (Result types),
not exceptions, and end up as the ``status_code``/``status_reason`` pair of a
failed response.

Architecture:
- Base class for parse and validation errors
- Does NOT inherit from Exception (not raised, returned in Result)
- Uses dataclass inheritance (NOT Protocol/ABC)

Usage:
    from src.core.errors import DomainError
    from src.core.enums import ErrorCode

    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Base domain error (does NOT inherit from Exception).

    Attributes:
        code: Machine-readable error code (enum).
        message: Human-readable message, returned as ``status_reason``.
        details: Optional context for logging.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
