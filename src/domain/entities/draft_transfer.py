"""Draft transfer domain entity.

The structured, not yet validated output of the instruction parser. Every
field holds the raw text the parser extracted. Nothing here has been checked
against the validation rules.
"""

from dataclasses import dataclass

from src.domain.enums.instruction_type import InstructionType


@dataclass(frozen=True, kw_only=True)
class DraftTransfer:
    """Parsed payment instruction awaiting validation.

    Attributes:
        type: Keyword form the instruction used.
        amount: Raw amount token (unvalidated digits).
        currency: Currency token, upper-cased.
        debit_account_id: Identifier of the account losing funds.
        credit_account_id: Identifier of the account gaining funds.
        execute_on: Raw date token after ON, or None when absent. A bare
            trailing ON gives an empty token, which counts as no date.

    Example:
        >>> draft = DraftTransfer(
        ...     type=InstructionType.CREDIT,
        ...     amount="300",
        ...     currency="NGN",
        ...     debit_account_id="acc-001",
        ...     credit_account_id="acc-002",
        ...     execute_on="2026-12-31",
        ... )
    """

    type: InstructionType
    amount: str
    currency: str
    debit_account_id: str
    credit_account_id: str
    execute_on: str | None = None

    @property
    def has_execution_date(self) -> bool:
        """Whether the instruction carried a non-blank ON date."""
        return bool(self.execute_on)

    def involves(self, account_id: str) -> bool:
        """Check if ``account_id`` is the debit or credit side."""
        return account_id in (self.debit_account_id, self.credit_account_id)
