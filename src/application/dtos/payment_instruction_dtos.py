"""Payment instruction DTOs (Data Transfer Objects).

Result dataclasses passed between pipeline stages and returned by the
ProcessPaymentInstruction handler.

DTOs:
    - ValidatedTransfer: Draft that passed the validator chain
    - ExecutedTransfer: Validated transfer after the executor ran (or held it)
    - AccountSnapshot: One affected account in a response
    - PaymentInstructionData: Response payload (every outcome)
    - PaymentInstructionResult: HTTP status + payload
"""

from dataclasses import dataclass, field
from typing import Any

from src.domain.entities.account import Account
from src.domain.entities.draft_transfer import DraftTransfer
from src.domain.enums.transfer_status import TransferStatus


@dataclass(frozen=True, kw_only=True)
class ValidatedTransfer:
    """Draft transfer that passed every validation rule.

    Attributes:
        draft: The parsed draft.
        amount: Amount as an int.
        debit_account: Resolved account losing funds (caller's object).
        credit_account: Resolved account gaining funds (caller's object).
    """

    draft: DraftTransfer
    amount: int
    debit_account: Account
    credit_account: Account


@dataclass(frozen=True, kw_only=True)
class ExecutedTransfer:
    """Validated transfer after the execution decision.

    Attributes:
        transfer: The validated transfer.
        executed: True when balances were moved, False when deferred.
        debit_balance_before: Debit balance before the transfer.
        credit_balance_before: Credit balance before the transfer.
    """

    transfer: ValidatedTransfer
    executed: bool
    debit_balance_before: int
    credit_balance_before: int

    def balance_before(self, account: Account) -> int:
        """Pre-transfer balance of ``account``.

        Accounts other than the two resolved objects were never touched, so
        their current balance is their pre-transfer balance.
        """
        if account is self.transfer.debit_account:
            return self.debit_balance_before
        if account is self.transfer.credit_account:
            return self.credit_balance_before
        return account.balance


@dataclass(frozen=True, kw_only=True)
class AccountSnapshot:
    """Affected account as reported in a response.

    Attributes:
        id: Account identifier.
        balance: Balance after the request.
        balance_before: Balance before the request.
        currency: Upper-cased currency code.
    """

    id: str
    balance: int
    balance_before: int
    currency: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "balance": self.balance,
            "balance_before": self.balance_before,
            "currency": self.currency,
        }


@dataclass(frozen=True, kw_only=True)
class PaymentInstructionData:
    """Response payload, identical in shape for every outcome.

    Attributes:
        type: DEBIT/CREDIT, or None when parsing failed.
        amount: Amount as an int, or None.
        currency: Upper-cased currency, or None.
        debit_account: Debit identifier, or None.
        credit_account: Credit identifier, or None.
        execute_by: Raw ON date token, or None.
        status: Outcome.
        status_reason: Human-readable reason.
        status_code: SY/AM/CU/AC/DT error code or AP approval code.
        accounts: Affected accounts in input order.
    """

    type: str | None
    amount: int | None
    currency: str | None
    debit_account: str | None
    credit_account: str | None
    execute_by: str | None
    status: TransferStatus
    status_reason: str
    status_code: str
    accounts: list[AccountSnapshot] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "amount": self.amount,
            "currency": self.currency,
            "debit_account": self.debit_account,
            "credit_account": self.credit_account,
            "execute_by": self.execute_by,
            "status": self.status.value,
            "status_reason": self.status_reason,
            "status_code": self.status_code,
            "accounts": [snapshot.to_dict() for snapshot in self.accounts],
        }


@dataclass(frozen=True, kw_only=True)
class PaymentInstructionResult:
    """Final result of processing one instruction.

    Attributes:
        http_status: 400 for failed outcomes, 200 for pending/successful.
        data: Response payload.
    """

    http_status: int
    data: PaymentInstructionData

    def to_dict(self) -> dict[str, Any]:
        """Plain ``{httpStatus, data}`` form returned to callers."""
        return {"httpStatus": self.http_status, "data": self.data.to_dict()}
