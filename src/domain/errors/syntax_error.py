"""Parse-stage error type.

Returned by the instruction parser when text cannot be turned into a draft
transfer. Always carries one of the SY codes.

Usage:
    from src.domain.errors import InstructionSyntaxError
    from src.core.result import Failure

    return Failure(error=InstructionSyntaxError(
        code=ErrorCode.MISSING_KEYWORD,
        message=InstructionError.missing_keyword("FROM"),
        keyword="FROM",
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class InstructionSyntaxError(DomainError):
    """Instruction text could not be parsed.

    Attributes:
        code: SY01, SY02 or SY03.
        message: Human-readable message.
        keyword: Grammar keyword the failure is about, when there is one.
        details: Additional context.
    """

    keyword: str | None = None
