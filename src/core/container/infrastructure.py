"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (console, human-readable or JSON)
- Instruction parsing

Reference:
    See src/core/container/__init__.py for the full list of factories.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.infrastructure.parsers.instruction_parser import InstructionParser


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.environment.uses_json_logs,
        level=settings.log_level,
    )


@lru_cache()
def get_instruction_parser() -> "InstructionParser":
    """Get instruction parser singleton (app-scoped).

    The parser holds no state, so one instance serves every request.

    Returns:
        InstructionParser instance.
    """
    from src.infrastructure.parsers.instruction_parser import InstructionParser

    return InstructionParser()
