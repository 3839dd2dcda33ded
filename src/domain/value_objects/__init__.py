"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.money import (
    CurrencyMismatchError,
    Money,
    normalize_currency,
)

__all__ = [
    "CurrencyMismatchError",
    "Money",
    "normalize_currency",
]
