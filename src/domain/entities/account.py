"""Account domain entity.

Represents one account in the closed set supplied with a payment
instruction. Accounts are not persisted. Each request brings its own
accounts, and an immediately executed transfer mutates them in place so the
caller observes the new balances.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Mutable data container; balance changes go through withdraw/deposit
    - Identity is the exact, case-sensitive ``id`` string

Usage:
    from src.domain.entities import Account
    from src.domain.value_objects import Money

    account = Account(id="N90394", balance=1000, currency="USD")
    account.withdraw(Money(500, "USD"))
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from src.core.result import Failure, Result, Success
from src.domain.value_objects.money import Money, normalize_currency


@dataclass
class Account:
    """Account participating in a payment instruction.

    Attributes:
        id: Account identifier, matched exactly against instruction text.
        balance: Whole-unit balance.
        currency: Currency code as supplied (any case).

    Example:
        >>> account = Account(id="acc-001", balance=1000, currency="ngn")
        >>> account.display_currency
        'NGN'
    """

    id: str
    balance: int
    currency: str

    def __post_init__(self) -> None:
        """Validate account after initialization.

        Raises:
            ValueError: If a field has the wrong type or currency is empty.
        """
        if not isinstance(self.id, str):
            raise ValueError(f"Account id must be a string: {self.id!r}")
        if isinstance(self.balance, bool) or not isinstance(self.balance, int):
            raise ValueError(f"Account balance must be an integer: {self.balance!r}")
        if not isinstance(self.currency, str) or not self.currency.strip():
            raise ValueError("Account currency cannot be empty")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Account":
        """Build an account from a request mapping.

        Args:
            data: Mapping with ``id``, ``balance`` and ``currency`` keys.

        Returns:
            Account instance.

        Raises:
            ValueError: If a key is missing or a value is invalid.
        """
        try:
            return cls(
                id=data["id"],
                balance=data["balance"],
                currency=data["currency"],
            )
        except KeyError as e:
            raise ValueError(f"Account is missing field: {e.args[0]}") from e

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    @property
    def display_currency(self) -> str:
        """Currency code as reported in responses (always upper-case)."""
        return normalize_currency(self.currency)

    @property
    def money(self) -> Money:
        """Current balance as a Money value."""
        return Money(self.balance, self.currency)

    def holds_currency(self, currency: str) -> bool:
        """Check if the account is denominated in ``currency`` (case-insensitive)."""
        return self.display_currency == normalize_currency(currency)

    def can_cover(self, amount: Money) -> bool:
        """Check if the balance is at least ``amount``.

        Raises:
            CurrencyMismatchError: If ``amount`` is in another currency.
        """
        return self.money >= amount

    # -------------------------------------------------------------------------
    # Balance Changes
    # -------------------------------------------------------------------------

    def withdraw(self, amount: Money) -> Result[None, str]:
        """Remove funds from the account.

        Args:
            amount: Positive amount in the account's currency.

        Returns:
            Success(None): Balance decreased by ``amount``.
            Failure(error): Non-positive amount or currency mismatch.
        """
        if not amount.is_positive():
            return Failure(error=f"Withdrawal amount must be positive: {amount}")
        if not self.holds_currency(amount.currency):
            return Failure(
                error=f"Withdrawal currency ({amount.currency}) must match "
                f"account currency ({self.display_currency})"
            )

        self.balance = (self.money - amount).amount
        return Success(value=None)

    def deposit(self, amount: Money) -> Result[None, str]:
        """Add funds to the account.

        Args:
            amount: Positive amount in the account's currency.

        Returns:
            Success(None): Balance increased by ``amount``.
            Failure(error): Non-positive amount or currency mismatch.
        """
        if not amount.is_positive():
            return Failure(error=f"Deposit amount must be positive: {amount}")
        if not self.holds_currency(amount.currency):
            return Failure(
                error=f"Deposit currency ({amount.currency}) must match "
                f"account currency ({self.display_currency})"
            )

        self.balance = (self.money + amount).amount
        return Success(value=None)
