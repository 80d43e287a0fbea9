"""
AI Error Taxonomy

Providers raise these; the enhancement client decides which are retried.
Algorithmic components never raise; they return empty sentinels instead.
"""

from __future__ import annotations

from typing import Optional


class AIError(Exception):
    """Base class for every failure of the optional AI layer."""

    kind = "api"
    retryable = False

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class AIAuthError(AIError):
    """401: the key was rejected. Needs user action."""

    kind = "auth"


class AIPermissionError(AIError):
    """403: the key may not use this model."""

    kind = "permission"


class AIRateLimited(AIError):
    """429, retried after the server-provided delay."""

    kind = "rate_limited"
    retryable = True

    def __init__(self, message: str, retry_after: Optional[float] = None):
        super().__init__(message, status=429)
        self.retry_after = retry_after


class AIServerError(AIError):
    """Any other non-2xx status."""

    kind = "server"
    retryable = True


class AINetworkError(AIError):
    """Connection failures and timeouts."""

    kind = "network"
    retryable = True


class AIEmptyResponse(AIError):
    """The model answered with no content."""

    kind = "empty"
    retryable = True


class AIParseError(AIError):
    """The model output was not JSON, even after repair."""

    kind = "parse"
    # Repaired locally once, never re-requested
