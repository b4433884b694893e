"""Commit resolution."""

from __future__ import annotations

import typing as typ

from buildtrigger.events.models import EventKind

if typ.TYPE_CHECKING:
    from buildtrigger.events.models import EventDescription


def resolve_commit_sha(event: EventDescription) -> str:
    """Return the commit under test.

    For pull requests this is the tip of the source branch rather than the
    synthetic merge commit the platform reports as ``head_sha``.
    """
    if event.event_kind is EventKind.PULL_REQUEST:
        return event.require_pull_request().head_sha
    return event.head_sha
