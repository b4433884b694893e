"""Branch resolution.

Strategies run in order; the first that recognises the event decides the
branch. An empty string is a legitimate answer meaning no branch could be
determined.
"""

from __future__ import annotations

import typing as typ

from buildtrigger.events.models import DeploymentInfo, EventKind

from .fallback import first_answer, remote_lookup

if typ.TYPE_CHECKING:
    from buildtrigger.events.models import EventDescription
    from buildtrigger.github.lookup import SafeCommitLookup

    from .fallback import FallbackStrategy

_BRANCH_REF_PREFIX = "refs/heads/"
_TAG_REF_PREFIX = "refs/tags/"
_DEPLOYMENT_KINDS = frozenset({EventKind.DEPLOYMENT, EventKind.DEPLOYMENT_STATUS})


def branch_from_ref(ref: str) -> str:
    """Return the branch or tag name encoded in ``ref``, or ``""``.

    Examples
    --------
    >>> branch_from_ref("refs/heads/feature/login")
    'feature/login'
    >>> branch_from_ref("refs/tags/v1.2.0")
    'v1.2.0'
    >>> branch_from_ref("refs/pull/7/merge")
    ''

    """
    for prefix in (_BRANCH_REF_PREFIX, _TAG_REF_PREFIX):
        if ref.startswith(prefix):
            return ref.removeprefix(prefix)
    return ""


async def _pull_request_head(
    event: EventDescription, lookup: SafeCommitLookup | None
) -> str | None:
    del lookup
    if event.event_kind is not EventKind.PULL_REQUEST:
        return None
    return event.require_pull_request().head_ref


async def _deployment_ref(
    event: EventDescription, lookup: SafeCommitLookup | None
) -> str | None:
    if event.event_kind not in _DEPLOYMENT_KINDS:
        return None
    deployment = event.deployment or DeploymentInfo()
    if not deployment.ref_is_commit_sha:
        return deployment.ref or ""

    # Some providers put the SHA in the ref; ask GitHub which branch it is.
    client = remote_lookup(event, lookup)
    if client is None or deployment.sha is None:
        return ""
    return await client.branch_for_commit(deployment.sha) or ""


async def _event_ref(
    event: EventDescription, lookup: SafeCommitLookup | None
) -> str | None:
    del lookup
    return branch_from_ref(event.ref)


BRANCH_STRATEGIES: tuple[FallbackStrategy, ...] = (
    _pull_request_head,
    _deployment_ref,
    _event_ref,
)


async def resolve_branch_name(
    event: EventDescription, lookup: SafeCommitLookup | None = None
) -> str:
    """Return the branch associated with ``event``.

    Parameters
    ----------
    event
        Event to resolve.
    lookup
        GitHub lookups, consulted only for deployments whose ref repeats the
        commit SHA and only when the event has an access token.

    Returns
    -------
    str
        Branch name, tag name for tag pushes, or ``""`` when undeterminable.

    """
    return await first_answer(BRANCH_STRATEGIES, event, lookup) or ""
