"""Assemble a :class:`ResolvedBuildContext` from a trigger event."""

from __future__ import annotations

import typing as typ

from buildtrigger.events.models import ResolvedBuildContext
from buildtrigger.logging import get_logger, log_info

from .actor import resolve_actor
from .branch import resolve_branch_name
from .commit import resolve_commit_sha
from .urls import DEFAULT_SERVER_URL, build_commit_url

if typ.TYPE_CHECKING:
    from buildtrigger.events.models import EventDescription
    from buildtrigger.github.lookup import SafeCommitLookup

logger = get_logger(__name__)


async def resolve_build_context(
    event: EventDescription,
    lookup: SafeCommitLookup | None = None,
    *,
    server_url: str = DEFAULT_SERVER_URL,
) -> ResolvedBuildContext:
    """Resolve commit, branch, commit URL and actor for ``event``.

    Each resolver works independently from the event; remote lookups run one
    at a time in a fixed order (branch first, then actor).
    """
    commit_sha = resolve_commit_sha(event)
    branch_name = await resolve_branch_name(event, lookup)
    log_info(logger, "Branch name: %s", branch_name)
    actor = await resolve_actor(event, lookup)
    return ResolvedBuildContext(
        commit_sha=commit_sha,
        branch_name=branch_name,
        commit_url=build_commit_url(
            event.repo_owner, event.repo_name, commit_sha, server_url=server_url
        ),
        actor=actor,
    )
