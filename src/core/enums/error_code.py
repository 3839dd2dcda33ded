"""Payment instruction status codes (machine-readable).

Codes are short, stable identifiers returned in the ``status_code`` field of
every response. Failure codes are grouped by prefix:

- SY: instruction syntax (parse stage)
- AM: amount
- CU: currency
- AC: accounts
- DT: execution date

``AP`` codes are not errors. They report accepted outcomes and share the same
response field, so they live in ``ApprovalCode`` alongside.
"""

from enum import Enum


class ErrorCode(Enum):
    """Failure codes, one per rejected condition."""

    # Syntax errors
    MISSING_KEYWORD = "SY01"
    INVALID_KEYWORD_ORDER = "SY02"
    MALFORMED_INSTRUCTION = "SY03"

    # Amount errors
    INVALID_AMOUNT = "AM01"

    # Currency errors
    CURRENCY_MISMATCH = "CU01"
    UNSUPPORTED_CURRENCY = "CU02"

    # Account errors
    INSUFFICIENT_FUNDS = "AC01"
    SAME_ACCOUNT = "AC02"
    ACCOUNT_NOT_FOUND = "AC03"
    INVALID_ACCOUNT_ID = "AC04"

    # Date errors
    INVALID_DATE = "DT01"

    @property
    def is_syntax_error(self) -> bool:
        """Whether the code belongs to the parse stage."""
        return self.value.startswith("SY")


class ApprovalCode(Enum):
    """Codes for accepted transfers."""

    EXECUTED = "AP00"
    SCHEDULED = "AP02"
