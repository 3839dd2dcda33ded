"""API Route Registry.

Catalog of every v1 endpoint. Adding an endpoint means adding an entry here;
the generator does the FastAPI wiring.

Resources:
    /api/v1/payment-instructions  - Payment instruction processing
"""

from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.presentation.routers.api.v1.payment_instructions import (
    create_payment_instruction,
)
from src.presentation.routers.api.v1.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.schemas.payment_instruction_schemas import PaymentInstructionResponse

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Payment Instructions Resource (1 endpoint)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/payment-instructions",
        handler=create_payment_instruction,
        resource="payment-instructions",
        tags=["Payment Instructions"],
        summary="Process payment instruction",
        description=(
            "Parse a DEBIT/CREDIT instruction, validate it against the supplied "
            "accounts and execute it now or schedule it for its ON date."
        ),
        operation_id="create_payment_instruction",
        response_model=PaymentInstructionResponse,
        status_code=200,
        errors=[
            ErrorSpec(
                status=400,
                description="Instruction rejected (SY/AM/CU/AC/DT status code)",
                model=PaymentInstructionResponse,
            ),
            ErrorSpec(
                status=422,
                description="Malformed request body",
                model=ProblemDetails,
            ),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
]
