"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import PaymentInstructionRequest, PaymentInstructionResponse
"""

from src.schemas.payment_instruction_schemas import (
    AccountSchema,
    AccountSnapshotResponse,
    PaymentInstructionRequest,
    PaymentInstructionResponse,
)

__all__ = [
    "AccountSchema",
    "AccountSnapshotResponse",
    "PaymentInstructionRequest",
    "PaymentInstructionResponse",
]
