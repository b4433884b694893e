"""Wire format of the trigger request."""

from __future__ import annotations

import typing as typ

import msgspec

if typ.TYPE_CHECKING:
    from buildtrigger.events.models import EventDescription, ResolvedBuildContext

    from .config import DispatchConfig


class Origin(msgspec.Struct, kw_only=True):
    """Repository the build belongs to."""

    owner: str
    name: str


class Build(msgspec.Struct, kw_only=True):
    """Build under test and the commit it was produced from."""

    url: str
    commit: str
    branch: str
    commit_url: str


class TriggerPayload(msgspec.Struct, kw_only=True, omit_defaults=True):
    """Body POSTed to the trigger endpoint.

    ``platform`` is omitted unless the deprecated input was supplied, and
    ``metadata`` is omitted when empty.
    """

    origin: Origin
    build: Build
    environment: str
    github_actor: str
    platform: str | None = None
    metadata: dict[str, str] = msgspec.field(default_factory=dict)


def build_trigger_payload(
    config: DispatchConfig,
    event: EventDescription,
    context: ResolvedBuildContext,
) -> TriggerPayload:
    """Combine dispatch settings and resolved facts into a request body."""
    return TriggerPayload(
        origin=Origin(owner=event.repo_owner, name=event.repo_name),
        build=Build(
            url=config.build_url,
            commit=context.commit_sha,
            branch=context.branch_name,
            commit_url=context.commit_url,
        ),
        environment=config.environment,
        github_actor=context.actor,
        platform=config.platform,
        metadata=dict(config.metadata),
    )
