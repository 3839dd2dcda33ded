"""Route metadata types for the API Route Registry.

The registry is the single source of truth for API routes: the generator
turns each RouteMetadata entry into a FastAPI route with its OpenAPI
documentation.

Core types:
    RouteMetadata: Complete route specification (method, path, handler, docs)
    HTTPMethod: HTTP method enum
    ErrorSpec: Error response specification for OpenAPI
    IdempotencyLevel: HTTP idempotency classification

Usage:
    from src.presentation.routers.api.v1.routes.metadata import RouteMetadata, HTTPMethod

    metadata = RouteMetadata(
        method=HTTPMethod.POST,
        path="/payment-instructions",
        handler=create_payment_instruction,
        resource="payment-instructions",
        tags=["Payment Instructions"],
        summary="Process payment instruction",
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    )
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification.

    Attributes:
        SAFE: No side effects (GET) - cacheable
        IDEMPOTENT: Side effects, but repeatable (PUT, DELETE) - safe to retry
        NON_IDEMPOTENT: Side effects, not repeatable (POST) - do not retry
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code (e.g., 400, 422)
        description: Human-readable error description
        model: Optional Pydantic model for the response body

    Examples:
        >>> ErrorSpec(status=400, description="Instruction rejected")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route (Single Source of Truth).

    Identity fields:
        method: HTTP method
        path: URL path relative to the version prefix
        handler: Endpoint function

    Grouping fields:
        resource: Resource category (e.g., "payment-instructions")
        tags: OpenAPI tags
        version: API version

    OpenAPI documentation:
        summary, description, operation_id

    Request/Response:
        response_model: Pydantic model for the success response
        status_code: Expected success status
        errors: Possible error responses for OpenAPI

    Behavior:
        idempotency: HTTP idempotency level
        deprecated: Whether endpoint is deprecated
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Any]

    # Grouping
    resource: str
    tags: Sequence[str]
    version: str = "v1"

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    idempotency: IdempotencyLevel
    deprecated: bool = False
