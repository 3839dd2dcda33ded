"""Application environment types.

Used by Settings to pick environment-specific behavior, chiefly the log
renderer (coloured console output locally, JSON everywhere else).

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test execution
- CI: Continuous integration
- PRODUCTION: Deployed service
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"

    @property
    def uses_json_logs(self) -> bool:
        """Whether logs should be rendered as JSON lines."""
        return self is not Environment.DEVELOPMENT
