"""Immutable Money value object with whole-unit integer amounts.

Instructions only carry whole amounts (no fractional units), so Money wraps a
plain ``int`` rather than a Decimal. Currency codes are upper-cased on
creation, so ``Money(5, "usd") == Money(5, "USD")``.

Error Handling:
    Arithmetic and comparison between different currencies raise
    CurrencyMismatchError (a ValueError subclass). The validator chain
    rejects mismatched currencies before any Money arithmetic happens, so
    this only fires on programming errors.

Usage:
    from src.domain.value_objects import Money

    balance = Money(1000, "USD")
    transfer = Money(250, "USD")
    remaining = balance - transfer  # Money(750, USD)
"""

from dataclasses import dataclass


class CurrencyMismatchError(ValueError):
    """Raised when attempting operations on different currencies."""

    def __init__(self, currency1: str, currency2: str) -> None:
        """Initialize currency mismatch error.

        Args:
            currency1: First currency code.
            currency2: Second currency code.
        """
        super().__init__(
            f"Cannot perform operation between {currency1} and {currency2}"
        )
        self.currency1 = currency1
        self.currency2 = currency2


def normalize_currency(code: str) -> str:
    """Normalize a currency code for comparison and display.

    Args:
        code: Currency code (case-insensitive).

    Returns:
        Upper-cased code with surrounding whitespace removed.

    Raises:
        ValueError: If code is empty or not a string.

    Example:
        >>> normalize_currency(" gbp ")
        'GBP'
    """
    if not code or not isinstance(code, str):
        raise ValueError("Currency code cannot be empty")
    return code.strip().upper()


@dataclass(frozen=True)
class Money:
    """Immutable monetary value with currency.

    Attributes:
        amount: Whole-unit integer (positive, negative, or zero).
        currency: Upper-cased currency code.

    Example:
        >>> Money(1000, "usd") - Money(400, "USD")
        Money(amount=600, currency='USD')
    """

    amount: int
    currency: str

    def __post_init__(self) -> None:
        """Validate money after initialization.

        Raises:
            ValueError: If amount is not an int or currency is empty.
        """
        # bool is an int subclass but never a valid amount
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError(f"Amount must be an integer: {self.amount!r}")

        object.__setattr__(self, "currency", normalize_currency(self.currency))

    # -------------------------------------------------------------------------
    # Arithmetic Operations (Same Currency Only)
    # -------------------------------------------------------------------------

    def __add__(self, other: "Money") -> "Money":
        """Add two Money values.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money values.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return Money(self.amount - other.amount, self.currency)

    # -------------------------------------------------------------------------
    # Comparison (Same Currency Only)
    # -------------------------------------------------------------------------

    def __ge__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount >= other.amount

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def is_positive(self) -> bool:
        """Check if amount is strictly positive."""
        return self.amount > 0

    def _check_same_currency(self, other: "Money") -> None:
        """Ensure both values share a currency.

        Raises:
            CurrencyMismatchError: If currencies differ.
        """
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)

    def __str__(self) -> str:
        """Human-readable form, e.g. '500 USD'."""
        return f"{self.amount} {self.currency}"
