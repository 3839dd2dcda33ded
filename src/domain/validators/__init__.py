"""Validators package exports.

Exports:
    - Validator functions (from functions.py)
    - Registry components (from registry.py)
"""

from src.domain.validators.functions import (
    is_valid_account_id,
    validate_account_id,
    validate_amount,
    validate_execution_date,
)
from src.domain.validators.registry import (
    VALIDATION_RULES_REGISTRY,
    ValidationCategory,
    ValidationRuleMetadata,
    get_all_validation_rules,
    get_rule_order,
    get_rules_by_category,
    get_validation_rule,
)

__all__ = [
    # Validator functions
    "is_valid_account_id",
    "validate_account_id",
    "validate_amount",
    "validate_execution_date",
    # Registry
    "VALIDATION_RULES_REGISTRY",
    "ValidationRuleMetadata",
    "ValidationCategory",
    "get_validation_rule",
    "get_all_validation_rules",
    "get_rule_order",
    "get_rules_by_category",
]
