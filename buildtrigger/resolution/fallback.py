"""Ordered fallback strategies.

A strategy inspects an event (and, when it needs GitHub, the lookup) and
returns ``None`` when it has nothing to say. Any other value, including an
empty string, is a final answer and stops evaluation.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from buildtrigger.events.models import EventDescription
    from buildtrigger.github.lookup import SafeCommitLookup

FallbackStrategy = typ.Callable[
    ["EventDescription", "SafeCommitLookup | None"],
    typ.Awaitable[str | None],
]


async def first_answer(
    strategies: cabc.Iterable[FallbackStrategy],
    event: EventDescription,
    lookup: SafeCommitLookup | None,
) -> str | None:
    """Evaluate ``strategies`` in order and return the first answer."""
    for strategy in strategies:
        answer = await strategy(event, lookup)
        if answer is not None:
            return answer
    return None


def remote_lookup(
    event: EventDescription, lookup: SafeCommitLookup | None
) -> SafeCommitLookup | None:
    """Return ``lookup`` only when the event permits remote queries."""
    if not event.has_remote_access_token:
        return None
    return lookup
