"""Payment instruction commands.

Architecture:
    - Commands are immutable value objects representing caller intent
    - ProcessPaymentInstructionHandler parses, validates and executes
    - The command carries the caller's Account objects; an executed transfer
      mutates them in place
"""

from dataclasses import dataclass

from src.domain.entities.account import Account


@dataclass(frozen=True, kw_only=True)
class ProcessPaymentInstruction:
    """Command to process one free-text payment instruction.

    Attributes:
        accounts: Accounts the instruction may reference, in request order.
        instruction: Raw instruction text. Not type-checked here; anything
            other than non-blank text fails parsing with SY03.

    Example:
        >>> command = ProcessPaymentInstruction(
        ...     accounts=[
        ...         Account(id="N90394", balance=1000, currency="USD"),
        ...         Account(id="N9122", balance=500, currency="USD"),
        ...     ],
        ...     instruction="DEBIT 500 USD FROM ACCOUNT N90394 FOR CREDIT TO ACCOUNT N9122",
        ... )
    """

    accounts: list[Account]
    instruction: object
