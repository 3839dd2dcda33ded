"""Data Transfer Objects (DTOs) for application layer.

DTOs are result dataclasses passed between pipeline stages and returned by
command handlers to the presentation layer.

Usage:
    from src.application.dtos import PaymentInstructionResult

Note:
    DTOs are NOT the same as:
    - Parser internal types (implementation details in infrastructure)
    - API schemas (Pydantic models in src/schemas)
"""

from src.application.dtos.payment_instruction_dtos import (
    AccountSnapshot,
    ExecutedTransfer,
    PaymentInstructionData,
    PaymentInstructionResult,
    ValidatedTransfer,
)

__all__ = [
    "AccountSnapshot",
    "ExecutedTransfer",
    "PaymentInstructionData",
    "PaymentInstructionResult",
    "ValidatedTransfer",
]
