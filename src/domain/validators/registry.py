"""Validation Rules Registry.

Single source of truth for the transfer validation chain: which rules exist,
which error code each one reports, and the order they run in. The validator
chain in the application layer walks this registry, and compliance tests
check the two stay in step.

Order matters: each rule assumes every earlier rule passed, and the first
failure ends the chain. A response's status code is therefore determined by
the first violated condition alone.

Pattern: Registry Pattern with metadata catalog and helper functions.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.core.enums import ErrorCode
from src.domain.validators.functions import (
    validate_account_id,
    validate_amount,
    validate_execution_date,
)


class ValidationCategory(str, Enum):
    """Categories for validation rules.

    Used to group rules by what they inspect.
    """

    FIELD_FORMAT = "field_format"  # A single draft field on its own
    ACCOUNT_STATE = "account_state"  # Draft fields checked against supplied accounts


@dataclass(frozen=True, kw_only=True)
class ValidationRuleMetadata:
    """Metadata for a single validation rule.

    Attributes:
        rule_name: Unique identifier for the rule (e.g., 'amount').
        code: Error code reported when the rule fails.
        field: Draft transfer field the rule inspects.
        validator_function: Field validator for FIELD_FORMAT rules, None for
            rules that need the account set.
        description: Human-readable description of the requirement.
        examples: Valid example values.
        category: Category for grouping.
        conditional: True when the rule only runs if its field is present.
    """

    rule_name: str
    code: ErrorCode
    field: str
    validator_function: Callable[[str], Any] | None
    description: str
    examples: list[str]
    category: ValidationCategory
    conditional: bool = False


# =============================================================================
# Validation Rules Registry (chain order)
# =============================================================================

VALIDATION_RULES_REGISTRY: dict[str, ValidationRuleMetadata] = {
    "amount": ValidationRuleMetadata(
        rule_name="amount",
        code=ErrorCode.INVALID_AMOUNT,
        field="amount",
        validator_function=validate_amount,
        description="Canonical base-10 positive integer (no sign, point or leading zeros)",
        examples=["1", "500", "1000000"],
        category=ValidationCategory.FIELD_FORMAT,
    ),
    "currency_supported": ValidationRuleMetadata(
        rule_name="currency_supported",
        code=ErrorCode.UNSUPPORTED_CURRENCY,
        field="currency",
        validator_function=None,
        description="Currency is one of the configured supported codes",
        examples=["NGN", "USD", "GBP", "GHS"],
        category=ValidationCategory.FIELD_FORMAT,
    ),
    "account_id_format": ValidationRuleMetadata(
        rule_name="account_id_format",
        code=ErrorCode.INVALID_ACCOUNT_ID,
        field="debit_account_id,credit_account_id",
        validator_function=validate_account_id,
        description="Non-empty; ASCII letters, digits, '-', '.' and '@' only",
        examples=["N90394", "acc-001", "user@bank.ng"],
        category=ValidationCategory.FIELD_FORMAT,
    ),
    "distinct_accounts": ValidationRuleMetadata(
        rule_name="distinct_accounts",
        code=ErrorCode.SAME_ACCOUNT,
        field="debit_account_id,credit_account_id",
        validator_function=None,
        description="Debit and credit identifiers differ",
        examples=["N90394 -> N9122"],
        category=ValidationCategory.FIELD_FORMAT,
    ),
    "account_exists": ValidationRuleMetadata(
        rule_name="account_exists",
        code=ErrorCode.ACCOUNT_NOT_FOUND,
        field="debit_account_id,credit_account_id",
        validator_function=None,
        description="Both identifiers match a supplied account (debit checked first)",
        examples=["N90394"],
        category=ValidationCategory.ACCOUNT_STATE,
    ),
    "currency_match": ValidationRuleMetadata(
        rule_name="currency_match",
        code=ErrorCode.CURRENCY_MISMATCH,
        field="currency",
        validator_function=None,
        description="Both accounts hold the instruction currency (case-insensitive)",
        examples=["USD"],
        category=ValidationCategory.ACCOUNT_STATE,
    ),
    "sufficient_funds": ValidationRuleMetadata(
        rule_name="sufficient_funds",
        code=ErrorCode.INSUFFICIENT_FUNDS,
        field="amount",
        validator_function=None,
        description="Debit account balance is at least the amount",
        examples=["balance 1000, amount 500"],
        category=ValidationCategory.ACCOUNT_STATE,
    ),
    "execution_date": ValidationRuleMetadata(
        rule_name="execution_date",
        code=ErrorCode.INVALID_DATE,
        field="execute_on",
        validator_function=validate_execution_date,
        description="YYYY-MM-DD naming a real calendar date",
        examples=["2026-12-31", "2024-02-29"],
        category=ValidationCategory.FIELD_FORMAT,
        conditional=True,
    ),
}


# =============================================================================
# Helper Functions
# =============================================================================


def get_validation_rule(rule_name: str) -> ValidationRuleMetadata | None:
    """Get validation rule metadata by name.

    Args:
        rule_name: Name of the validation rule (e.g., 'amount').

    Returns:
        ValidationRuleMetadata if found, None otherwise.
    """
    return VALIDATION_RULES_REGISTRY.get(rule_name)


def get_all_validation_rules() -> list[ValidationRuleMetadata]:
    """Get all validation rules in chain order.

    Returns:
        List of all ValidationRuleMetadata objects, first rule first.
    """
    return list(VALIDATION_RULES_REGISTRY.values())


def get_rule_order() -> list[ErrorCode]:
    """Get error codes in the order the chain checks them.

    Example:
        >>> [code.value for code in get_rule_order()][:3]
        ['AM01', 'CU02', 'AC04']
    """
    return [rule.code for rule in VALIDATION_RULES_REGISTRY.values()]


def get_rules_by_category(category: ValidationCategory) -> list[ValidationRuleMetadata]:
    """Get all validation rules in a specific category.

    Args:
        category: Category to filter by.

    Returns:
        List of ValidationRuleMetadata objects in the category, in chain order.
    """
    return [
        rule for rule in VALIDATION_RULES_REGISTRY.values() if rule.category == category
    ]
