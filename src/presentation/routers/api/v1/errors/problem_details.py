"""RFC 9457 Problem Details for HTTP APIs.

Used only for requests the pipeline never sees: bodies that fail schema
validation, unknown routes and unexpected faults. Payment instruction
outcomes, including failed ones, use the payment instruction payload.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Dotted path of the offending field (e.g. "accounts.0.balance")
        code: Machine-readable error code
        message: Human-readable error message
    """

    field: str = Field(..., description="Field path")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details response.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: Request path of this occurrence
        errors: Field-specific errors (validation failures only)
        trace_id: Request trace ID for debugging

    Examples:
        >>> problem = ProblemDetails(
        ...     type="/errors/validation-failed",
        ...     title="Validation Failed",
        ...     status=422,
        ...     detail="Request validation failed. Check 'errors' for details.",
        ...     instance="/api/v1/payment-instructions",
        ...     errors=[
        ...         ErrorDetail(
        ...             field="accounts.0.balance",
        ...             code="int_type",
        ...             message="Input should be a valid integer",
        ...         )
        ...     ],
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["/errors/validation-failed"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Validation Failed"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[422],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Request validation failed. Check 'errors' for details."],
    )
    instance: str = Field(
        ...,
        description="Request path of this occurrence",
        examples=["/api/v1/payment-instructions"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
