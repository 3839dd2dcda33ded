"""Domain enums for business logic.

Available Enums:
    - InstructionType: Keyword form of an instruction (DEBIT, CREDIT)
    - TransferStatus: Outcome of a processed instruction
"""

from src.domain.enums.instruction_type import InstructionType
from src.domain.enums.transfer_status import TransferStatus

__all__ = [
    "InstructionType",
    "TransferStatus",
]
