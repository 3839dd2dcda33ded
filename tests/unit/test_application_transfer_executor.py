"""Unit tests for TransferExecutor.

Tests cover:
- Immediate execution moves exactly the amount (conservation)
- Mutation happens on the caller's account objects
- hold() leaves balances untouched
- A refused credit leg rolls back the debit
"""

import pytest

from src.application.dtos import ValidatedTransfer
from src.application.services.transfer_executor import TransferExecutor
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.entities import Account, DraftTransfer
from src.domain.enums import InstructionType
from tests.conftest import create_account


def make_validated(debit: Account, credit: Account, amount: int = 500) -> ValidatedTransfer:
    draft = DraftTransfer(
        type=InstructionType.DEBIT,
        amount=str(amount),
        currency="USD",
        debit_account_id=debit.id,
        credit_account_id=credit.id,
    )
    return ValidatedTransfer(
        draft=draft, amount=amount, debit_account=debit, credit_account=credit
    )


@pytest.fixture
def executor() -> TransferExecutor:
    return TransferExecutor()


@pytest.mark.unit
class TestExecute:
    """Test execute()."""

    def test_moves_amount_between_accounts(self, executor, usd_accounts):
        debit, credit = usd_accounts

        result = executor.execute(make_validated(debit, credit))

        assert isinstance(result, Success)
        assert debit.balance == 500
        assert credit.balance == 1000
        assert result.value.executed is True
        assert result.value.debit_balance_before == 1000
        assert result.value.credit_balance_before == 500

    def test_total_balance_is_conserved(self, executor, usd_accounts):
        total_before = sum(account.balance for account in usd_accounts)

        executor.execute(make_validated(*usd_accounts, amount=321))

        assert sum(account.balance for account in usd_accounts) == total_before

    def test_balance_before_by_account(self, executor, usd_accounts):
        debit, credit = usd_accounts
        bystander = create_account("other", 70)

        result = executor.execute(make_validated(debit, credit))

        assert isinstance(result, Success)
        assert result.value.balance_before(debit) == 1000
        assert result.value.balance_before(credit) == 500
        assert result.value.balance_before(bystander) == 70

    def test_refused_credit_rolls_back_debit(self, executor):
        debit = create_account("A", 1000, "USD")
        credit = create_account("B", 0, "GBP")

        result = executor.execute(make_validated(debit, credit))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CURRENCY_MISMATCH
        assert debit.balance == 1000
        assert credit.balance == 0

    def test_refused_debit_changes_nothing(self, executor):
        debit = create_account("A", 1000, "NGN")
        credit = create_account("B", 0, "USD")

        result = executor.execute(make_validated(debit, credit))

        assert isinstance(result, Failure)
        assert debit.balance == 1000
        assert credit.balance == 0


@pytest.mark.unit
class TestHold:
    """Test hold()."""

    def test_hold_leaves_balances_untouched(self, executor, usd_accounts):
        debit, credit = usd_accounts

        held = executor.hold(make_validated(debit, credit))

        assert held.executed is False
        assert debit.balance == 1000
        assert credit.balance == 500
        assert held.balance_before(debit) == debit.balance
        assert held.balance_before(credit) == credit.balance
