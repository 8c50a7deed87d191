"""
Error kinds raised across the application boundary.
Zero external dependencies.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    UPSTREAM_PRIMARY_FAILURE = "upstream_primary_failure"
    # Logged only; a degraded secondary source never fails a request.
    UPSTREAM_SECONDARY_DEGRADED = "upstream_secondary_degraded"


class StockboardError(Exception):
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(StockboardError, ValueError):
    kind = ErrorKind.INVALID_INPUT


class UpstreamUnavailableError(StockboardError):
    """The primary quote lookup failed; the whole request fails with it."""

    kind = ErrorKind.UPSTREAM_PRIMARY_FAILURE

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.source = source
