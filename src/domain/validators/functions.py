"""Field validation functions for draft transfers.

Validators are pure functions that raise ValueError on validation failure and
return the validated (converted) value otherwise. They scan character by
character and never use regular expressions, so each rejection traces back
to a single character or position.

The ValueError message is the human-readable reason reported to callers.

Reference:
    - src/domain/validators/registry.py (rule order and codes)
"""

from datetime import date

from src.domain.errors.instruction_error import InstructionError

DIGITS = "0123456789"
ACCOUNT_ID_SYMBOLS = "-.@"


def _is_ascii_alnum(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z" or "0" <= char <= "9"


def validate_amount(v: str) -> int:
    """Validate a raw amount token.

    The token must be the canonical base-10 form of a positive integer:
    no sign, no decimal point, no leading zeros, no trailing characters.

    Args:
        v: Raw amount text from the instruction.

    Returns:
        The amount as an int.

    Raises:
        ValueError: If the amount is not a canonical positive integer.

    Example:
        >>> validate_amount("500")
        500
        >>> validate_amount("0100")
        ValueError: Amount must be a positive integer
    """
    if not v or "." in v or "-" in v:
        raise ValueError(InstructionError.INVALID_AMOUNT)

    try:
        amount = int(v)
    except ValueError as e:
        raise ValueError(InstructionError.INVALID_AMOUNT) from e

    if amount <= 0 or str(amount) != v:
        raise ValueError(InstructionError.INVALID_AMOUNT)
    return amount


def is_valid_account_id(v: str) -> bool:
    """Check account identifier format.

    Allowed characters: ASCII letters, digits, ``-``, ``.`` and ``@``.

    Args:
        v: Account identifier.

    Returns:
        True if the identifier is non-empty and every character is allowed.

    Example:
        >>> is_valid_account_id("user@bank.ng")
        True
        >>> is_valid_account_id("acc_01")
        False
    """
    if not v:
        return False
    for char in v:
        if not (_is_ascii_alnum(char) or char in ACCOUNT_ID_SYMBOLS):
            return False
    return True


def validate_account_id(v: str) -> str:
    """Validate account identifier format.

    Args:
        v: Account identifier.

    Returns:
        Identifier unchanged (validation only).

    Raises:
        ValueError: If the identifier is empty or has a disallowed character.
    """
    if not is_valid_account_id(v):
        raise ValueError(InstructionError.INVALID_ACCOUNT_ID)
    return v


def validate_execution_date(v: str) -> date:
    """Validate an execution date token (YYYY-MM-DD).

    Args:
        v: Raw date text following ON.

    Returns:
        The parsed calendar date.

    Raises:
        ValueError: With INVALID_DATE_FORMAT if the text is not shaped like
            YYYY-MM-DD, or INVALID_DATE if it is shaped correctly but names
            no real day (e.g. 2025-02-30).

    Example:
        >>> validate_execution_date("2026-12-31")
        datetime.date(2026, 12, 31)
        >>> validate_execution_date("2026-02-30")
        ValueError: Invalid date
    """
    if not v or len(v) != 10 or v[4] != "-" or v[7] != "-":
        raise ValueError(InstructionError.INVALID_DATE_FORMAT)

    year, month, day = v[0:4], v[5:7], v[8:10]
    for segment in (year, month, day):
        if not all(char in DIGITS for char in segment):
            raise ValueError(InstructionError.INVALID_DATE_FORMAT)

    try:
        return date(int(year), int(month), int(day))
    except ValueError as e:
        raise ValueError(InstructionError.INVALID_DATE) from e
