"""Transfer executor.

Moves funds between the two accounts of a validated transfer. Mutation is
applied to the account objects the caller supplied, so the caller sees the
new balances once the pipeline returns.
"""

from src.application.dtos.payment_instruction_dtos import (
    ExecutedTransfer,
    ValidatedTransfer,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.value_objects.money import Money


class TransferExecutor:
    """Applies or holds validated transfers.

    Example:
        >>> executor = TransferExecutor()
        >>> match executor.execute(validated):
        ...     case Success(value=executed):
        ...         print(executed.debit_balance_before, validated.debit_account.balance)
    """

    def execute(
        self, validated: ValidatedTransfer
    ) -> Result[ExecutedTransfer, DomainError]:
        """Debit then credit by exactly the transfer amount.

        If the credit leg fails after the debit succeeded, the debit is
        reversed so no account is left half-updated.

        Args:
            validated: Transfer that passed the validator chain.

        Returns:
            Success(ExecutedTransfer): Both balances moved.
            Failure(DomainError): An account refused the movement.
        """
        debit_account = validated.debit_account
        credit_account = validated.credit_account
        debit_before = debit_account.balance
        credit_before = credit_account.balance
        amount = Money(validated.amount, validated.draft.currency)

        withdrawn = debit_account.withdraw(amount)
        if isinstance(withdrawn, Failure):
            return Failure(error=self._refused(withdrawn.error, debit_account.id))

        deposited = credit_account.deposit(amount)
        if isinstance(deposited, Failure):
            debit_account.balance = debit_before
            return Failure(error=self._refused(deposited.error, credit_account.id))

        return Success(
            value=ExecutedTransfer(
                transfer=validated,
                executed=True,
                debit_balance_before=debit_before,
                credit_balance_before=credit_before,
            )
        )

    def hold(self, validated: ValidatedTransfer) -> ExecutedTransfer:
        """Record a deferred transfer without touching balances."""
        return ExecutedTransfer(
            transfer=validated,
            executed=False,
            debit_balance_before=validated.debit_account.balance,
            credit_balance_before=validated.credit_account.balance,
        )

    @staticmethod
    def _refused(reason: str, account_id: str) -> DomainError:
        return ValidationError(
            code=ErrorCode.CURRENCY_MISMATCH,
            message=reason,
            field="currency",
            details={"account_id": account_id},
        )
