"""Actor resolution.

The actor credited with a build is the commit author where the event says
who that is, falling back to the identity that triggered the workflow.
"""

from __future__ import annotations

import typing as typ

from buildtrigger.events.models import EventKind

from .fallback import first_answer, remote_lookup

if typ.TYPE_CHECKING:
    from buildtrigger.events.models import EventDescription
    from buildtrigger.github.lookup import SafeCommitLookup

    from .fallback import FallbackStrategy


async def _push_commit_author(
    event: EventDescription, lookup: SafeCommitLookup | None
) -> str | None:
    del lookup
    if event.event_kind is not EventKind.PUSH or not event.push_commits:
        return None
    first = event.push_commits[0]
    return first.author_username or first.author_name or None


async def _pull_request_author(
    event: EventDescription, lookup: SafeCommitLookup | None
) -> str | None:
    del lookup
    if event.event_kind is not EventKind.PULL_REQUEST:
        return None
    return event.require_pull_request().author_login or None


async def _deployment_commit_author(
    event: EventDescription, lookup: SafeCommitLookup | None
) -> str | None:
    if event.event_kind not in {EventKind.DEPLOYMENT, EventKind.DEPLOYMENT_STATUS}:
        return None
    sha = event.deployment.sha if event.deployment else None
    client = remote_lookup(event, lookup)
    if not sha or client is None:
        return None
    return await client.commit_author_login(sha)


async def _triggering_actor(
    event: EventDescription, lookup: SafeCommitLookup | None
) -> str | None:
    del lookup
    return event.fallback_actor


ACTOR_STRATEGIES: tuple[FallbackStrategy, ...] = (
    _push_commit_author,
    _pull_request_author,
    _deployment_commit_author,
    _triggering_actor,
)


async def resolve_actor(
    event: EventDescription, lookup: SafeCommitLookup | None = None
) -> str:
    """Return the identity credited with triggering the build.

    Never empty: the final strategy returns the platform-reported actor,
    which the workflow environment always provides.
    """
    return await first_answer(ACTOR_STRATEGIES, event, lookup) or event.fallback_actor
