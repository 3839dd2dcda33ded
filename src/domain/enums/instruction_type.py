"""Instruction type enumeration.

Records which keyword form an instruction was written in.
"""

from enum import Enum


class InstructionType(str, Enum):
    """Surface form of a payment instruction.

    The form only changes word order. In both forms the debit account loses
    funds and the credit account gains them.

    **Grammars**:
        DEBIT <amount> <currency> FROM ACCOUNT <id> FOR CREDIT TO ACCOUNT <id> [ON <date>]
        CREDIT <amount> <currency> TO ACCOUNT <id> FOR DEBIT FROM ACCOUNT <id> [ON <date>]
    """

    DEBIT = "DEBIT"
    """Instruction names the debit side first."""

    CREDIT = "CREDIT"
    """Instruction names the credit side first."""

    @property
    def keyword_sequence(self) -> tuple[str, ...]:
        """Required keywords in the order they must appear.

        The optional trailing ``ON`` keyword is not included.

        Returns:
            Keyword tuple starting with the type keyword itself.
        """
        if self is InstructionType.DEBIT:
            return ("DEBIT", "FROM", "ACCOUNT", "FOR", "CREDIT", "TO", "ACCOUNT")
        return ("CREDIT", "TO", "ACCOUNT", "FOR", "DEBIT", "FROM", "ACCOUNT")
