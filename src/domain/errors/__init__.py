"""Domain errors package.

Usage:
    from src.domain.errors import InstructionError, InstructionSyntaxError
"""

from src.domain.errors.instruction_error import InstructionError
from src.domain.errors.syntax_error import InstructionSyntaxError

__all__ = [
    "InstructionError",
    "InstructionSyntaxError",
]
