"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from src.core.enums import ApprovalCode, ErrorCode, Environment
"""

from src.core.enums.environment import Environment
from src.core.enums.error_code import ApprovalCode, ErrorCode

__all__ = ["ApprovalCode", "ErrorCode", "Environment"]
