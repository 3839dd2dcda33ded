"""Payment instructions resource handlers.

Handler functions for processing free-text payment instructions.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    create_payment_instruction - Parse, validate and execute an instruction

Every pipeline outcome is answered with the payment instruction payload:
400 for parse/validation failures, 200 for pending and successful transfers.
"""

from fastapi import Depends, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.process_payment_instruction_handler import (
    ProcessPaymentInstructionHandler,
)
from src.application.commands.payment_instruction_commands import (
    ProcessPaymentInstruction,
)
from src.core.container import get_logger, get_process_payment_instruction_handler
from src.domain.entities.account import Account
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.schemas.payment_instruction_schemas import (
    PaymentInstructionRequest,
    PaymentInstructionResponse,
)


async def create_payment_instruction(
    request: Request,
    body: PaymentInstructionRequest,
    handler: ProcessPaymentInstructionHandler = Depends(
        get_process_payment_instruction_handler
    ),
    logger: LoggerProtocol = Depends(get_logger),
) -> JSONResponse:
    """Process a payment instruction against the supplied accounts.

    POST /api/v1/payment-instructions → 200 OK / 400 Bad Request

    Args:
        request: FastAPI request object.
        body: Accounts and instruction text.
        handler: ProcessPaymentInstruction handler (injected).
        logger: Application logger (injected).

    Returns:
        JSONResponse with the payment instruction payload and the
        outcome's HTTP status.
    """
    command = ProcessPaymentInstruction(
        accounts=[Account.from_dict(account.to_mapping()) for account in body.accounts],
        instruction=body.instruction,
    )

    result = handler.handle(command)
    response = PaymentInstructionResponse.from_data(result.data)

    logger.info(
        "payment_instruction_request_completed",
        path=str(request.url.path),
        http_status=result.http_status,
        status=response.status,
        status_code=response.status_code,
    )

    return JSONResponse(status_code=result.http_status, content=response.model_dump())
