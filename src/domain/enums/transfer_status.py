"""Transfer status enumeration.

Defines the outcome states a processed payment instruction can end in.
"""

from enum import Enum


class TransferStatus(str, Enum):
    """Outcome of a processed payment instruction.

    **Terminal States**: all three. Nothing is persisted, so a PENDING
    transfer is never revisited by this service.
    """

    SUCCESSFUL = "successful"
    """Balances were moved within the request."""

    PENDING = "pending"
    """Accepted for a future date; balances untouched."""

    FAILED = "failed"
    """Rejected by the parser or a validation rule; balances untouched."""

    @property
    def http_status(self) -> int:
        """HTTP status code reported for this outcome.

        Returns:
            400 for failed instructions, 200 otherwise.
        """
        if self is TransferStatus.FAILED:
            return 400
        return 200
