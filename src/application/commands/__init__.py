"""Commands - Operations that act on caller-supplied state.

Commands represent caller intent. They are immutable dataclasses with
imperative names (ProcessPaymentInstruction).

Each command has a corresponding handler that runs the pipeline stages.
"""

from src.application.commands.payment_instruction_commands import (
    ProcessPaymentInstruction,
)

__all__ = [
    "ProcessPaymentInstruction",
]
