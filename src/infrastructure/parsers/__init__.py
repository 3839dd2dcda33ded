"""Instruction text parsers.

Exports:
    InstructionParser: Free-text DEBIT/CREDIT instruction → DraftTransfer
"""

from src.infrastructure.parsers.instruction_parser import InstructionParser

__all__ = ["InstructionParser"]
