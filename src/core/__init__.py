"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error classes for domain-level error handling
- Status code enums

The core module has NO dependencies on the domain, application or
presentation layers.
"""

from src.core.errors import (
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.core.enums import ApprovalCode, ErrorCode
from src.core.result import Failure, Result, Success

__all__ = [
    "ApprovalCode",
    "DomainError",
    "ErrorCode",
    "Failure",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
