"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_process_payment_instruction_handler

The container is organized into modules:
- infrastructure: App-scoped singletons (logging, parsing)
- handlers: Command handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_instruction_parser,
    get_logger,
)

# Command handlers
from src.core.container.handlers import (
    get_process_payment_instruction_handler,
)

__all__ = [
    # Infrastructure
    "get_instruction_parser",
    "get_logger",
    # Handlers
    "get_process_payment_instruction_handler",
]
