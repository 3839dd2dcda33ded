"""Payment instruction handler factories.

Handler instances are cheap to build and hold only stateless collaborators,
so a fresh handler is returned per call (request-scoped when used through
FastAPI ``Depends``).

Reference:
    See src/application/commands/handlers/ for handler implementations.
"""

from typing import TYPE_CHECKING

from src.core.config import settings
from src.core.container.infrastructure import get_instruction_parser, get_logger

if TYPE_CHECKING:
    from src.application.commands.handlers.process_payment_instruction_handler import (
        ProcessPaymentInstructionHandler,
    )


# ============================================================================
# Command Handler Factories (Request-Scoped)
# ============================================================================


def get_process_payment_instruction_handler() -> "ProcessPaymentInstructionHandler":
    """Get ProcessPaymentInstruction command handler.

    Returns:
        ProcessPaymentInstructionHandler wired with the configured
        supported currencies and the application logger.

    Usage:
        # Presentation Layer (FastAPI Depends)
        handler: ProcessPaymentInstructionHandler = Depends(
            get_process_payment_instruction_handler
        )
    """
    from src.application.commands.handlers.process_payment_instruction_handler import (
        ProcessPaymentInstructionHandler,
    )
    from src.application.services.execution_scheduler import ExecutionScheduler
    from src.application.services.response_assembler import ResponseAssembler
    from src.application.services.transfer_executor import TransferExecutor
    from src.application.services.transfer_validator import TransferValidator

    return ProcessPaymentInstructionHandler(
        parser=get_instruction_parser(),
        validator=TransferValidator(
            supported_currencies=settings.supported_currency_codes
        ),
        scheduler=ExecutionScheduler(),
        executor=TransferExecutor(),
        assembler=ResponseAssembler(),
        logger=get_logger(),
    )
