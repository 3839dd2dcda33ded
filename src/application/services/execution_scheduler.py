"""Execution scheduler.

Decides whether a validated transfer runs now or is deferred, based on its
optional ON date. Dates are compared at day granularity against the current
UTC day; time of day never matters.
"""

from collections.abc import Callable
from datetime import UTC, date, datetime

from src.domain.validators import validate_execution_date


def utc_today() -> date:
    """Current calendar day in UTC."""
    return datetime.now(UTC).date()


class ExecutionScheduler:
    """Immediate-vs-deferred decision for transfers.

    Example:
        >>> scheduler = ExecutionScheduler(clock=lambda: date(2026, 1, 15))
        >>> scheduler.is_immediate("2026-01-15")
        True
        >>> scheduler.is_immediate("2026-01-16")
        False
    """

    def __init__(self, clock: Callable[[], date] | None = None) -> None:
        """Initialize scheduler.

        Args:
            clock: Returns "today". Defaults to the current UTC day.
        """
        self._clock = clock or utc_today

    def is_immediate(self, execute_on: str | None) -> bool:
        """Check if a transfer dated ``execute_on`` should run now.

        Args:
            execute_on: Raw ON date token, or None when no date was given.
                A blank token counts as no date.

        Returns:
            True when there is no (or a blank) date, or the date is today
            or earlier.
            False when the date is later than today, or is not a valid date
            (the validator chain rejects invalid dates first, so that case
            does not occur in the normal pipeline).
        """
        if not execute_on:
            return True

        try:
            target = validate_execution_date(execute_on)
        except ValueError:
            return False

        return target <= self._clock()
