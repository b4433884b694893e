"""Build an :class:`EventDescription` from the GitHub Actions environment.

The runner exposes the event name, ref, SHA, repository and actors as
``GITHUB_*`` environment variables and writes the full webhook payload to the
file named by ``GITHUB_EVENT_PATH``. Only the payload fields that resolution
needs are decoded; everything else is ignored.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec

from buildtrigger.common.slug import parse_repo_slug
from buildtrigger.github.client import read_github_token
from buildtrigger.logging import get_logger, log_debug

from .errors import EventContextError
from .models import (
    DeploymentInfo,
    EventDescription,
    EventKind,
    PullRequestInfo,
    PushCommit,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = get_logger(__name__)


class _User(msgspec.Struct):
    login: str | None = None


class _CommitAuthor(msgspec.Struct):
    username: str | None = None
    name: str | None = None


class _PushedCommit(msgspec.Struct):
    author: _CommitAuthor | None = None


class _PullRequestHead(msgspec.Struct):
    ref: str
    sha: str


class _PullRequest(msgspec.Struct):
    head: _PullRequestHead
    user: _User | None = None


class _Deployment(msgspec.Struct):
    sha: str | None = None
    ref: str | None = None


class EventPayload(msgspec.Struct):
    """Webhook payload fields read during resolution."""

    pull_request: _PullRequest | None = None
    deployment: _Deployment | None = None
    commits: list[_PushedCommit] = msgspec.field(default_factory=list)


def load_event_payload(path: str | None) -> EventPayload:
    """Decode the webhook payload stored at ``path``.

    A missing path or unreadable file yields an empty payload; a file that is
    present but malformed raises :class:`EventContextError`.
    """
    if not path:
        return EventPayload()
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        log_debug(logger, "Event payload %s unavailable: %s", path, exc)
        return EventPayload()
    try:
        return msgspec.json.decode(raw, type=EventPayload)
    except (msgspec.DecodeError, msgspec.ValidationError) as exc:
        raise EventContextError.malformed_payload(path, str(exc)) from exc


def _require(environ: cabc.Mapping[str, str], name: str) -> str:
    value = environ.get(name, "").strip()
    if not value:
        raise EventContextError.missing_variable(name)
    return value


def _fallback_actor(environ: cabc.Mapping[str, str]) -> str:
    triggering = environ.get("GITHUB_TRIGGERING_ACTOR", "").strip()
    if triggering:
        return triggering
    return _require(environ, "GITHUB_ACTOR")


def _pull_request_info(payload: EventPayload, event_name: str) -> PullRequestInfo:
    pull_request = payload.pull_request
    if pull_request is None:
        raise EventContextError.missing_pull_request(event_name)
    user = pull_request.user
    return PullRequestInfo(
        head_ref=pull_request.head.ref,
        head_sha=pull_request.head.sha,
        author_login=user.login if user else None,
    )


def _push_commits(payload: EventPayload) -> tuple[PushCommit, ...]:
    return tuple(
        PushCommit(
            author_username=commit.author.username if commit.author else None,
            author_name=commit.author.name if commit.author else None,
        )
        for commit in payload.commits
    )


def read_event_description(
    environ: cabc.Mapping[str, str],
    *,
    payload: EventPayload | None = None,
) -> EventDescription:
    """Describe the triggering event using runner environment variables.

    Parameters
    ----------
    environ
        Environment mapping, normally ``os.environ``.
    payload
        Pre-decoded webhook payload. When omitted the file named by
        ``GITHUB_EVENT_PATH`` is decoded.

    Raises
    ------
    EventContextError
        If required variables are missing, the repository slug is malformed,
        or a pull request event carries no pull request object.

    """
    event_name = environ.get("GITHUB_EVENT_NAME", "").strip()
    event_kind = EventKind.from_event_name(event_name)
    slug = _require(environ, "GITHUB_REPOSITORY")
    try:
        owner, name = parse_repo_slug(slug)
    except ValueError as exc:
        raise EventContextError.invalid_repository(slug) from exc

    if payload is None:
        payload = load_event_payload(environ.get("GITHUB_EVENT_PATH"))

    pull_request = (
        _pull_request_info(payload, event_name)
        if event_kind is EventKind.PULL_REQUEST
        else None
    )
    deployment = None
    if event_kind in {EventKind.DEPLOYMENT, EventKind.DEPLOYMENT_STATUS}:
        raw = payload.deployment or _Deployment()
        deployment = DeploymentInfo(sha=raw.sha, ref=raw.ref)
    push_commits = _push_commits(payload) if event_kind is EventKind.PUSH else ()

    return EventDescription(
        event_kind=event_kind,
        event_name=event_name,
        ref=environ.get("GITHUB_REF", "").strip(),
        head_sha=_require(environ, "GITHUB_SHA"),
        repo_owner=owner,
        repo_name=name,
        fallback_actor=_fallback_actor(environ),
        pull_request=pull_request,
        deployment=deployment,
        push_commits=push_commits,
        has_remote_access_token=bool(read_github_token(environ)),
    )
