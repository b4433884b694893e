"""GitHub commit lookups used during build context resolution."""

from __future__ import annotations

from .client import (
    CommitLookupClient,
    GitHubRestClient,
    GitHubRestConfig,
    read_github_token,
)
from .errors import GitHubAPIError, GitHubConfigError, GitHubResponseShapeError
from .lookup import SafeCommitLookup, select_pull_request
from .models import Account, AssociatedPullRequest, BaseRef, Branch, CommitDetail
from .observability import ErrorCategory, LookupEventLogger, categorize_error

__all__ = [
    "Account",
    "AssociatedPullRequest",
    "BaseRef",
    "Branch",
    "CommitDetail",
    "CommitLookupClient",
    "ErrorCategory",
    "GitHubAPIError",
    "GitHubConfigError",
    "GitHubResponseShapeError",
    "GitHubRestClient",
    "GitHubRestConfig",
    "LookupEventLogger",
    "SafeCommitLookup",
    "categorize_error",
    "read_github_token",
    "select_pull_request",
]
