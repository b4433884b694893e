"""Typed models describing a CI trigger event and its resolved facts."""

from __future__ import annotations

import dataclasses
import enum

from .errors import EventContextError


class EventKind(enum.StrEnum):
    """Event classes that resolution distinguishes between."""

    PUSH = "push"
    PULL_REQUEST = "pull_request"
    DEPLOYMENT = "deployment"
    DEPLOYMENT_STATUS = "deployment_status"
    OTHER = "other"

    @classmethod
    def from_event_name(cls, name: str) -> EventKind:
        """Map a GitHub Actions event name onto an event kind.

        ``pull_request_target`` carries the same pull request payload as
        ``pull_request`` and is treated identically. Unknown names map to
        :attr:`OTHER`.
        """
        normalized = name.strip().lower()
        if normalized == "pull_request_target":
            return cls.PULL_REQUEST
        try:
            return cls(normalized)
        except ValueError:
            return cls.OTHER


@dataclasses.dataclass(frozen=True, slots=True)
class PullRequestInfo:
    """Pull request facts carried by a pull request event."""

    head_ref: str
    head_sha: str
    author_login: str | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class DeploymentInfo:
    """Deployment facts carried by deployment and deployment status events.

    Some deployment providers populate ``ref`` with the commit SHA instead of
    a branch name, in which case ``sha == ref``.
    """

    sha: str | None = None
    ref: str | None = None

    @property
    def ref_is_commit_sha(self) -> bool:
        """Return True when ``ref`` repeats the SHA rather than naming a branch."""
        return bool(self.sha) and self.sha == self.ref


@dataclasses.dataclass(frozen=True, slots=True)
class PushCommit:
    """Author identity for one commit in a push event."""

    author_username: str | None = None
    author_name: str | None = None


@dataclasses.dataclass(frozen=True, slots=True)
class EventDescription:
    """Read-only description of one CI-triggering occurrence.

    Attributes
    ----------
    event_kind
        Classified event type.
    event_name
        Raw event name reported by the platform, kept so ``OTHER`` events
        remain identifiable in logs.
    ref
        Raw ref (branch ref, tag ref or synthetic merge ref).
    head_sha
        Commit the platform considers current. For pull requests this is the
        synthetic merge commit, not the source branch tip.
    pull_request
        Present only for pull request events.
    deployment
        Present only for deployment and deployment status events.
    push_commits
        Commits of a push event in payload order; empty otherwise.
    repo_owner, repo_name
        Source repository coordinates.
    fallback_actor
        Platform-reported triggering identity, used as the last resort for
        actor resolution. Never empty.
    has_remote_access_token
        Whether remote lookups may be attempted at all.

    """

    event_kind: EventKind
    ref: str
    head_sha: str
    repo_owner: str
    repo_name: str
    fallback_actor: str
    event_name: str = ""
    pull_request: PullRequestInfo | None = None
    deployment: DeploymentInfo | None = None
    push_commits: tuple[PushCommit, ...] = ()
    has_remote_access_token: bool = False

    def require_pull_request(self) -> PullRequestInfo:
        """Return the pull request record, which pull request events must carry."""
        if self.pull_request is None:
            name = self.event_name or EventKind.PULL_REQUEST.value
            raise EventContextError.missing_pull_request(name)
        return self.pull_request

    @property
    def repo_slug(self) -> str:
        """Return the ``owner/name`` identifier of the source repository."""
        return f"{self.repo_owner}/{self.repo_name}"


@dataclasses.dataclass(frozen=True, slots=True)
class ResolvedBuildContext:
    """Canonical facts about the build under test.

    ``branch_name`` may be empty, meaning no branch could be determined.
    ``commit_sha``, ``commit_url`` and ``actor`` are always populated.
    """

    commit_sha: str
    branch_name: str
    commit_url: str
    actor: str
