"""Failure-absorbing commit lookups.

:class:`SafeCommitLookup` is the single place remote failures are caught.
Every query returns ``None`` when GitHub cannot answer, so callers treat a
failed lookup exactly like an empty one and move to their next fallback.
"""

from __future__ import annotations

import typing as typ

import httpx

from .errors import GitHubAPIError, GitHubResponseShapeError
from .observability import LookupEventLogger

T = typ.TypeVar("T")

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .client import CommitLookupClient
    from .models import AssociatedPullRequest

_ABSORBED_ERRORS: tuple[type[Exception], ...] = (
    GitHubAPIError,
    GitHubResponseShapeError,
    httpx.HTTPError,
)


def select_pull_request(
    pull_requests: cabc.Sequence[AssociatedPullRequest], sha: str
) -> AssociatedPullRequest | None:
    """Pick the pull request that best explains how ``sha`` was produced.

    The pull request whose merge commit is ``sha`` wins; otherwise the first
    pull request in the order GitHub returned them.
    """
    for pull_request in pull_requests:
        if pull_request.merge_commit_sha == sha:
            return pull_request
    return pull_requests[0] if pull_requests else None


class SafeCommitLookup:
    """Commit queries for one repository with failures degraded to ``None``."""

    def __init__(
        self,
        client: CommitLookupClient,
        owner: str,
        repo: str,
        *,
        event_logger: LookupEventLogger | None = None,
    ) -> None:
        """Bind ``client`` to the ``owner/repo`` repository."""
        self._client = client
        self._owner = owner
        self._repo = repo
        self._events = event_logger or LookupEventLogger()

    async def _attempt(
        self,
        operation: str,
        sha: str,
        call: cabc.Callable[[str, str, str], cabc.Awaitable[T]],
    ) -> T | None:
        try:
            return await call(self._owner, self._repo, sha)
        except _ABSORBED_ERRORS as exc:
            self._events.log_lookup_failed(operation, sha, exc)
            return None

    async def branch_where_head(self, sha: str) -> str | None:
        """Return the first branch whose head is ``sha``."""
        branches = await self._attempt(
            "branches_where_head", sha, self._client.list_branches_where_head
        )
        if not branches:
            return None
        return branches[0].name or None

    async def base_branch_of_pull_request(self, sha: str) -> str | None:
        """Return the base branch of the pull request associated with ``sha``."""
        pull_requests = await self._attempt(
            "pull_requests_for_commit",
            sha,
            self._client.list_pull_requests_for_commit,
        )
        chosen = select_pull_request(pull_requests or [], sha)
        if chosen is None:
            return None
        return chosen.base_ref or None

    async def branch_for_commit(self, sha: str) -> str | None:
        """Return the branch associated with ``sha`` using two stages.

        Stage A asks which branches currently point at ``sha``. When none do,
        typically because the branch moved on after a deployment, stage B
        recovers the base branch of the pull request that produced ``sha``.
        """
        for stage, query in (
            ("branches_where_head", self.branch_where_head),
            ("associated_pull_request", self.base_branch_of_pull_request),
        ):
            branch = await query(sha)
            if branch:
                self._events.log_branch_resolved(stage, sha, branch)
                return branch
        self._events.log_lookup_empty("branch_for_commit", sha)
        return None

    async def commit_author_login(self, sha: str) -> str | None:
        """Return the GitHub login of the author of ``sha``."""
        commit = await self._attempt("get_commit", sha, self._client.get_commit)
        if commit is None:
            return None
        return commit.author_login or None
