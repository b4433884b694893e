"""Structured log events for GitHub commit lookups.

Lookup failures never abort resolution, so these events are the only trace of
a degraded answer. All events use lazy interpolation.
"""

from __future__ import annotations

import enum
import logging

import httpx

from .errors import GitHubAPIError, GitHubConfigError, GitHubResponseShapeError

logger = logging.getLogger(__name__)

# HTTP status code threshold for server errors (5xx)
_HTTP_SERVER_ERROR_THRESHOLD = 500


class LookupEventType(enum.StrEnum):
    """Structured log event types for commit lookups."""

    LOOKUP_FAILED = "lookup.failed"
    LOOKUP_EMPTY = "lookup.empty"
    BRANCH_RESOLVED = "lookup.branch.resolved"


class ErrorCategory(enum.StrEnum):
    """Categories for lookup failure classification."""

    TRANSIENT = "transient"
    CLIENT_ERROR = "client_error"
    SCHEMA_DRIFT = "schema_drift"
    CONFIGURATION = "configuration"
    NETWORK = "network"
    UNKNOWN = "unknown"


_EXCEPTION_CATEGORY_MAP: tuple[tuple[type[BaseException], ErrorCategory], ...] = (
    (GitHubResponseShapeError, ErrorCategory.SCHEMA_DRIFT),
    (GitHubConfigError, ErrorCategory.CONFIGURATION),
    (httpx.TransportError, ErrorCategory.NETWORK),
)


def categorize_error(exc: BaseException) -> ErrorCategory:
    """Categorize a lookup exception for diagnostics."""
    # 5xx responses are worth re-running the workflow for; 4xx are not
    if isinstance(exc, GitHubAPIError):
        if (
            exc.status_code is not None
            and exc.status_code >= _HTTP_SERVER_ERROR_THRESHOLD
        ):
            return ErrorCategory.TRANSIENT
        return ErrorCategory.CLIENT_ERROR

    for exc_type, category in _EXCEPTION_CATEGORY_MAP:
        if isinstance(exc, exc_type):
            return category

    return ErrorCategory.UNKNOWN


class LookupEventLogger:
    """Emit structured lookup events via Python logging."""

    def log_lookup_failed(
        self, operation: str, sha: str, error: BaseException
    ) -> None:
        """Log a lookup whose failure was absorbed."""
        logger.warning(
            "[%s] operation=%s sha=%s error_type=%s error_category=%s "
            "error_message=%s",
            LookupEventType.LOOKUP_FAILED,
            operation,
            sha,
            type(error).__name__,
            categorize_error(error),
            str(error),
            exc_info=error,
        )

    def log_lookup_empty(self, operation: str, sha: str) -> None:
        """Log a lookup that succeeded but returned nothing usable."""
        logger.info(
            "[%s] operation=%s sha=%s",
            LookupEventType.LOOKUP_EMPTY,
            operation,
            sha,
        )

    def log_branch_resolved(self, stage: str, sha: str, branch: str) -> None:
        """Log the stage that produced a branch for a commit."""
        logger.info(
            "[%s] stage=%s sha=%s branch=%s",
            LookupEventType.BRANCH_RESOLVED,
            stage,
            sha,
            branch,
        )
