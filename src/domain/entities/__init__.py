"""Domain entities package.

Usage:
    from src.domain.entities import Account, DraftTransfer
"""

from src.domain.entities.account import Account
from src.domain.entities.draft_transfer import DraftTransfer

__all__ = [
    "Account",
    "DraftTransfer",
]
