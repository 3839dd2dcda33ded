"""Response assembler.

Builds the PaymentInstructionResult for each pipeline outcome. Every outcome
has the same payload shape; only the populated fields differ.

Outcomes:
    - Parse failure: transfer fields null, no accounts, HTTP 400
    - Validation failure: draft fields echoed, pre-transfer snapshots, HTTP 400
    - Pending: AP02, balances untouched, HTTP 200
    - Successful: AP00, post-transfer balances, HTTP 200

Snapshots list only the debit and credit accounts, in the order they appear
in the caller's account list, with currency upper-cased.
"""

from collections.abc import Sequence

from src.application.dtos.payment_instruction_dtos import (
    AccountSnapshot,
    ExecutedTransfer,
    PaymentInstructionData,
    PaymentInstructionResult,
)
from src.core.enums import ApprovalCode
from src.core.errors import DomainError
from src.domain.entities.account import Account
from src.domain.entities.draft_transfer import DraftTransfer
from src.domain.enums.transfer_status import TransferStatus
from src.domain.errors import InstructionError

DIGITS = "0123456789"


def leading_integer(raw: str) -> int | None:
    """Read the integer prefix of ``raw``, the way a lenient form field would.

    An optional sign followed by digits is read; anything after the digits
    is ignored. A prefix too long for int conversion reads as None.

    Example:
        >>> leading_integer("100.0")
        100
        >>> leading_integer("-5")
        -5
        >>> leading_integer("abc") is None
        True
    """
    text = raw.strip()
    sign = 1
    if text[:1] in ("-", "+"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]

    end = 0
    while end < len(text) and text[end] in DIGITS:
        end += 1
    if end == 0:
        return None
    try:
        return sign * int(text[:end])
    except ValueError:
        # longer than sys.get_int_max_str_digits()
        return None


def involved_snapshots(
    accounts: Sequence[Account],
    draft: DraftTransfer,
    executed: ExecutedTransfer | None = None,
) -> list[AccountSnapshot]:
    """Snapshots of the accounts a draft names, in input order.

    Args:
        accounts: Caller's accounts, in request order.
        draft: Parsed draft naming the debit and credit ids.
        executed: Execution record when balances may have moved; without it
            every snapshot reports its current balance as the prior one.
    """
    snapshots: list[AccountSnapshot] = []
    for account in accounts:
        if not draft.involves(account.id):
            continue
        balance_before = (
            executed.balance_before(account) if executed is not None else account.balance
        )
        snapshots.append(
            AccountSnapshot(
                id=account.id,
                balance=account.balance,
                balance_before=balance_before,
                currency=account.display_currency,
            )
        )
    return snapshots


class ResponseAssembler:
    """Builds response payloads for every pipeline outcome."""

    def parse_failure(self, error: DomainError) -> PaymentInstructionResult:
        return self._result(
            PaymentInstructionData(
                type=None,
                amount=None,
                currency=None,
                debit_account=None,
                credit_account=None,
                execute_by=None,
                status=TransferStatus.FAILED,
                status_reason=error.message,
                status_code=error.code.value,
            )
        )

    def validation_failure(
        self, draft: DraftTransfer, accounts: Sequence[Account], error: DomainError
    ) -> PaymentInstructionResult:
        """Failed payload echoing the draft.

        ``amount`` carries the integer prefix of the raw amount, or None when
        there is none or it is zero.
        """
        return self._result(
            PaymentInstructionData(
                type=draft.type.value,
                amount=leading_integer(draft.amount) or None,
                currency=draft.currency,
                debit_account=draft.debit_account_id,
                credit_account=draft.credit_account_id,
                execute_by=draft.execute_on,
                status=TransferStatus.FAILED,
                status_reason=error.message,
                status_code=error.code.value,
                accounts=involved_snapshots(accounts, draft),
            )
        )

    def pending(
        self, executed: ExecutedTransfer, accounts: Sequence[Account]
    ) -> PaymentInstructionResult:
        return self._approved(
            executed,
            accounts,
            status=TransferStatus.PENDING,
            code=ApprovalCode.SCHEDULED,
            reason=InstructionError.SCHEDULED,
        )

    def successful(
        self, executed: ExecutedTransfer, accounts: Sequence[Account]
    ) -> PaymentInstructionResult:
        return self._approved(
            executed,
            accounts,
            status=TransferStatus.SUCCESSFUL,
            code=ApprovalCode.EXECUTED,
            reason=InstructionError.EXECUTED,
        )

    def _approved(
        self,
        executed: ExecutedTransfer,
        accounts: Sequence[Account],
        *,
        status: TransferStatus,
        code: ApprovalCode,
        reason: str,
    ) -> PaymentInstructionResult:
        draft = executed.transfer.draft
        return self._result(
            PaymentInstructionData(
                type=draft.type.value,
                amount=executed.transfer.amount,
                currency=draft.currency,
                debit_account=draft.debit_account_id,
                credit_account=draft.credit_account_id,
                execute_by=draft.execute_on,
                status=status,
                status_reason=reason,
                status_code=code.value,
                accounts=involved_snapshots(accounts, draft, executed),
            )
        )

    @staticmethod
    def _result(data: PaymentInstructionData) -> PaymentInstructionResult:
        return PaymentInstructionResult(http_status=data.status.http_status, data=data)
