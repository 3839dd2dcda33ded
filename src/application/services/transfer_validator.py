"""Transfer validator chain.

Checks a DraftTransfer against the supplied accounts, rule by rule, in the
order declared by VALIDATION_RULES_REGISTRY. The first failing rule ends the
chain and its error is returned. Later rules rely on earlier ones having
passed (e.g. the funds check uses the amount parsed by the amount rule and
the account resolved by the existence rule).

Flow:
    1. AM01 amount is a canonical positive integer
    2. CU02 currency is supported
    3. AC04 account identifiers are well-formed (debit, then credit)
    4. AC02 debit and credit differ
    5. AC03 both accounts exist (debit, then credit)
    6. CU01 both accounts hold the instruction currency
    7. AC01 debit account can cover the amount
    8. DT01 execution date is a real YYYY-MM-DD date (only when a non-blank date is given)
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from src.application.dtos.payment_instruction_dtos import ValidatedTransfer
from src.core.enums import ErrorCode
from src.core.errors import DomainError, NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.entities.draft_transfer import DraftTransfer
from src.domain.errors import InstructionError
from src.domain.value_objects.money import Money
from src.domain.validators import (
    get_all_validation_rules,
    validate_account_id,
    validate_amount,
    validate_execution_date,
)


def find_account(accounts: Sequence[Account], account_id: str) -> Account | None:
    """Return the first account whose id equals ``account_id`` exactly."""
    for account in accounts:
        if account.id == account_id:
            return account
    return None


@dataclass
class _ChainState:
    """Values resolved by earlier rules for later ones."""

    draft: DraftTransfer
    accounts: Sequence[Account]
    amount: int = 0
    debit_account: Account | None = None
    credit_account: Account | None = None


type _Check = Callable[[_ChainState], DomainError | None]


class TransferValidator:
    """Ordered, short-circuiting validation of draft transfers.

    Thread-safe: holds only the immutable supported-currency set.

    Example:
        >>> validator = TransferValidator(supported_currencies=["NGN", "USD"])
        >>> result = validator.validate(draft, accounts)
        >>> if isinstance(result, Failure):
        ...     print(result.error.code.value)
    """

    def __init__(self, supported_currencies: Sequence[str]) -> None:
        """Initialize validator.

        Args:
            supported_currencies: Accepted currency codes, upper-case,
                in the order they are listed in messages.
        """
        self._supported_currencies = tuple(code.upper() for code in supported_currencies)
        self._checks: dict[str, _Check] = {
            "amount": self._check_amount,
            "currency_supported": self._check_currency_supported,
            "account_id_format": self._check_account_id_format,
            "distinct_accounts": self._check_distinct_accounts,
            "account_exists": self._check_accounts_exist,
            "currency_match": self._check_currency_match,
            "sufficient_funds": self._check_sufficient_funds,
            "execution_date": self._check_execution_date,
        }

    @property
    def supported_currencies(self) -> tuple[str, ...]:
        return self._supported_currencies

    def validate(
        self, draft: DraftTransfer, accounts: Sequence[Account]
    ) -> Result[ValidatedTransfer, DomainError]:
        """Run the chain.

        Args:
            draft: Parsed instruction.
            accounts: Accounts supplied with the request.

        Returns:
            Success(ValidatedTransfer): Every rule passed.
            Failure(DomainError): First failing rule's error.
        """
        state = _ChainState(draft=draft, accounts=accounts)

        for rule in get_all_validation_rules():
            error = self._checks[rule.rule_name](state)
            if error is not None:
                return Failure(error=error)

        # account_exists guarantees both are resolved
        assert state.debit_account is not None and state.credit_account is not None
        return Success(
            value=ValidatedTransfer(
                draft=draft,
                amount=state.amount,
                debit_account=state.debit_account,
                credit_account=state.credit_account,
            )
        )

    # -------------------------------------------------------------------------
    # Rules (chain order)
    # -------------------------------------------------------------------------

    def _check_amount(self, state: _ChainState) -> DomainError | None:
        try:
            state.amount = validate_amount(state.draft.amount)
        except ValueError as e:
            return ValidationError(
                code=ErrorCode.INVALID_AMOUNT, message=str(e), field="amount"
            )
        return None

    def _check_currency_supported(self, state: _ChainState) -> DomainError | None:
        if state.draft.currency in self._supported_currencies:
            return None
        return ValidationError(
            code=ErrorCode.UNSUPPORTED_CURRENCY,
            message=InstructionError.unsupported_currency(self._supported_currencies),
            field="currency",
        )

    def _check_account_id_format(self, state: _ChainState) -> DomainError | None:
        sides = (
            ("debit", state.draft.debit_account_id),
            ("credit", state.draft.credit_account_id),
        )
        for side, account_id in sides:
            try:
                validate_account_id(account_id)
            except ValueError:
                return ValidationError(
                    code=ErrorCode.INVALID_ACCOUNT_ID,
                    message=InstructionError.invalid_account_id(side),
                    field=f"{side}_account_id",
                )
        return None

    def _check_distinct_accounts(self, state: _ChainState) -> DomainError | None:
        if state.draft.debit_account_id != state.draft.credit_account_id:
            return None
        return ValidationError(
            code=ErrorCode.SAME_ACCOUNT,
            message=InstructionError.SAME_ACCOUNT,
            field="credit_account_id",
        )

    def _check_accounts_exist(self, state: _ChainState) -> DomainError | None:
        draft = state.draft
        state.debit_account = find_account(state.accounts, draft.debit_account_id)
        state.credit_account = find_account(state.accounts, draft.credit_account_id)

        for account_id, account in (
            (draft.debit_account_id, state.debit_account),
            (draft.credit_account_id, state.credit_account),
        ):
            if account is None:
                return NotFoundError(
                    code=ErrorCode.ACCOUNT_NOT_FOUND,
                    message=InstructionError.account_not_found(account_id),
                    resource_type="Account",
                    resource_id=account_id,
                )
        return None

    def _check_currency_match(self, state: _ChainState) -> DomainError | None:
        for account in (state.debit_account, state.credit_account):
            if account is not None and not account.holds_currency(state.draft.currency):
                return ValidationError(
                    code=ErrorCode.CURRENCY_MISMATCH,
                    message=InstructionError.CURRENCY_MISMATCH,
                    field="currency",
                    details={"account_id": account.id, "account_currency": account.display_currency},
                )
        return None

    def _check_sufficient_funds(self, state: _ChainState) -> DomainError | None:
        debit_account = state.debit_account
        if debit_account is None or debit_account.can_cover(
            Money(state.amount, state.draft.currency)
        ):
            return None
        return ValidationError(
            code=ErrorCode.INSUFFICIENT_FUNDS,
            message=InstructionError.insufficient_funds(
                debit_account.id,
                available=debit_account.balance,
                required=state.amount,
                currency=state.draft.currency,
            ),
            field="amount",
        )

    def _check_execution_date(self, state: _ChainState) -> DomainError | None:
        if not state.draft.has_execution_date:
            return None
        try:
            validate_execution_date(state.draft.execute_on)
        except ValueError as e:
            return ValidationError(
                code=ErrorCode.INVALID_DATE, message=str(e), field="execute_on"
            )
        return None
