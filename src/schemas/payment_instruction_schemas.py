"""Payment instruction schemas for the HTTP API.

Request and response schemas for the payment instructions endpoint. The
request schema only checks shape (account fields and their types); every
business rule is applied by the pipeline so it can answer with a status
code instead of a 422.
"""

from typing import Any

from pydantic import BaseModel, Field, StrictInt, field_validator

from src.application.dtos.payment_instruction_dtos import PaymentInstructionData


class AccountSchema(BaseModel):
    """Account supplied with an instruction.

    Attributes:
        id: Account identifier (case-sensitive).
        balance: Whole-unit balance.
        currency: Currency code, any case.
    """

    id: str = Field(description="Account identifier")
    balance: StrictInt = Field(description="Whole-unit balance")
    currency: str = Field(description="Currency code")

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """Reject blank currency codes."""
        if not v.strip():
            raise ValueError("Currency cannot be empty")
        return v

    def to_mapping(self) -> dict[str, Any]:
        return {"id": self.id, "balance": self.balance, "currency": self.currency}


class PaymentInstructionRequest(BaseModel):
    """Request schema for processing a payment instruction.

    Attributes:
        accounts: Accounts the instruction may reference, in order.
        instruction: Free-text instruction. Missing, blank or non-text values
            are answered with SY03 rather than rejected here.
    """

    accounts: list[AccountSchema] = Field(
        default_factory=list, description="Accounts the instruction may reference"
    )
    instruction: Any = Field(default=None, description="Payment instruction text")

    model_config = {
        "json_schema_extra": {
            "example": {
                "accounts": [
                    {"id": "N90394", "balance": 1000, "currency": "USD"},
                    {"id": "N9122", "balance": 500, "currency": "USD"},
                ],
                "instruction": "DEBIT 500 USD FROM ACCOUNT N90394 FOR CREDIT TO ACCOUNT N9122",
            }
        }
    }


class AccountSnapshotResponse(BaseModel):
    """Affected account in a response."""

    id: str
    balance: int
    balance_before: int
    currency: str


class PaymentInstructionResponse(BaseModel):
    """Response schema for every instruction outcome.

    Failed outcomes use the same shape with HTTP 400.
    """

    type: str | None = Field(description="DEBIT or CREDIT, null if unparsed")
    amount: int | None = Field(description="Transfer amount")
    currency: str | None = Field(description="Upper-cased currency code")
    debit_account: str | None = Field(description="Account losing funds")
    credit_account: str | None = Field(description="Account gaining funds")
    execute_by: str | None = Field(description="Raw ON date, if any")
    status: str = Field(description="successful, pending or failed")
    status_reason: str = Field(description="Human-readable reason")
    status_code: str = Field(description="Approval (AP*) or error code")
    accounts: list[AccountSnapshotResponse] = Field(
        description="Debit and credit accounts in request order"
    )

    @classmethod
    def from_data(cls, data: PaymentInstructionData) -> "PaymentInstructionResponse":
        """Create response from the handler payload.

        Args:
            data: Handler payload.

        Returns:
            PaymentInstructionResponse instance.
        """
        return cls.model_validate(data.to_dict())

    model_config = {
        "json_schema_extra": {
            "example": {
                "type": "DEBIT",
                "amount": 500,
                "currency": "USD",
                "debit_account": "N90394",
                "credit_account": "N9122",
                "execute_by": None,
                "status": "successful",
                "status_reason": "Transaction executed successfully",
                "status_code": "AP00",
                "accounts": [
                    {"id": "N90394", "balance": 500, "balance_before": 1000, "currency": "USD"},
                    {"id": "N9122", "balance": 1000, "balance_before": 500, "currency": "USD"},
                ],
            }
        }
    }
