"""Payment instruction error messages.

Default human-readable messages for every status code, plus the
parameterized variants individual rules return.

Architecture:
    - Domain layer constants (no infrastructure dependencies)
    - Paired with ErrorCode/ApprovalCode values in error dataclasses
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from src.domain.errors import InstructionError
    from src.core.result import Failure

    if debit_id == credit_id:
        return Failure(error=ValidationError(
            code=ErrorCode.SAME_ACCOUNT,
            message=InstructionError.SAME_ACCOUNT,
        ))
"""

from collections.abc import Sequence


class InstructionError:
    """Instruction error message constants.

    Error Categories:
        - Syntax errors: MISSING_KEYWORD, INVALID_KEYWORD_ORDER, MALFORMED_INSTRUCTION
        - Amount errors: INVALID_AMOUNT
        - Currency errors: CURRENCY_MISMATCH, UNSUPPORTED_CURRENCY
        - Account errors: INSUFFICIENT_FUNDS, SAME_ACCOUNT, ACCOUNT_NOT_FOUND,
          INVALID_ACCOUNT_ID
        - Date errors: INVALID_DATE_FORMAT, INVALID_DATE
    """

    # -------------------------------------------------------------------------
    # Syntax Errors
    # -------------------------------------------------------------------------

    MISSING_KEYWORD = "Missing required keyword"
    """A keyword of the grammar is absent."""

    MISSING_TYPE_KEYWORD = "Missing required keyword: DEBIT or CREDIT"
    """Instruction does not start with DEBIT or CREDIT."""

    INVALID_KEYWORD_ORDER = "Invalid keyword order"
    """All keywords are present but not in grammar order."""

    MALFORMED_INSTRUCTION = "Malformed instruction: unable to parse keywords"
    """Instruction is empty, not text, or its segments cannot be read."""

    # -------------------------------------------------------------------------
    # Amount Errors
    # -------------------------------------------------------------------------

    INVALID_AMOUNT = "Amount must be a positive integer"
    """Amount is not the canonical form of a positive integer."""

    # -------------------------------------------------------------------------
    # Currency Errors
    # -------------------------------------------------------------------------

    CURRENCY_MISMATCH = "Account currency mismatch"
    """An account's currency differs from the instruction currency."""

    UNSUPPORTED_CURRENCY = "Unsupported currency"
    """Instruction currency is outside the supported set."""

    # -------------------------------------------------------------------------
    # Account Errors
    # -------------------------------------------------------------------------

    INSUFFICIENT_FUNDS = "Insufficient funds in debit account"
    """Debit account balance is below the amount."""

    SAME_ACCOUNT = "Debit and credit accounts cannot be the same"
    """Debit and credit identifiers are equal."""

    ACCOUNT_NOT_FOUND = "Account not found"
    """Identifier does not match any supplied account."""

    INVALID_ACCOUNT_ID = "Invalid account ID format"
    """Identifier is empty or contains a disallowed character."""

    # -------------------------------------------------------------------------
    # Date Errors
    # -------------------------------------------------------------------------

    INVALID_DATE_FORMAT = "Invalid date format. Expected YYYY-MM-DD"
    """Date is not shaped like YYYY-MM-DD."""

    INVALID_DATE = "Invalid date"
    """Date is well-shaped but not a real calendar date."""

    # -------------------------------------------------------------------------
    # Approvals
    # -------------------------------------------------------------------------

    EXECUTED = "Transaction executed successfully"
    SCHEDULED = "Transaction scheduled for future execution"

    # -------------------------------------------------------------------------
    # Parameterized messages
    # -------------------------------------------------------------------------

    @staticmethod
    def missing_keyword(keyword: str, after: str | None = None) -> str:
        """Message for a keyword that could not be located."""
        if after is not None and keyword == "ACCOUNT":
            return f"{InstructionError.MISSING_KEYWORD}: {keyword} after {after}"
        return f"{InstructionError.MISSING_KEYWORD}: {keyword}"

    @staticmethod
    def keyword_out_of_order(keyword: str, after: str) -> str:
        """Message for a keyword found only before its predecessor."""
        return f"{InstructionError.INVALID_KEYWORD_ORDER}: {keyword} must come after {after}"

    @staticmethod
    def missing_amount_and_currency(type_keyword: str) -> str:
        """Message for an amount segment that is not exactly two tokens."""
        return f"Invalid format: expected amount and currency after {type_keyword}"

    @staticmethod
    def unsupported_currency(supported: Sequence[str]) -> str:
        """Message listing the supported currencies, e.g. 'NGN, USD, and GBP'."""
        codes = list(supported)
        if len(codes) == 1:
            listed = codes[0]
        elif len(codes) == 2:
            listed = f"{codes[0]} and {codes[1]}"
        else:
            listed = ", ".join(codes[:-1]) + f", and {codes[-1]}"
        return f"{InstructionError.UNSUPPORTED_CURRENCY}. Only {listed} are supported"

    @staticmethod
    def invalid_account_id(side: str) -> str:
        """Message for a malformed debit or credit identifier."""
        return f"{InstructionError.INVALID_ACCOUNT_ID} for {side} account"

    @staticmethod
    def account_not_found(account_id: str) -> str:
        """Message naming the identifier that did not resolve."""
        return f"{InstructionError.ACCOUNT_NOT_FOUND}: {account_id}"

    @staticmethod
    def insufficient_funds(
        account_id: str, available: int, required: int, currency: str
    ) -> str:
        """Message stating available vs. required funds."""
        return (
            f"Insufficient funds in account {account_id}: "
            f"has {available} {currency}, needs {required} {currency}"
        )
