"""Typed GitHub REST response models used by commit lookups.

Only the fields resolution reads are declared; msgspec ignores the rest.
"""

from __future__ import annotations

import msgspec


class Branch(msgspec.Struct):
    """A branch returned by the branches-where-head endpoint."""

    name: str


class BaseRef(msgspec.Struct):
    """Branch a pull request targets."""

    ref: str | None = None


class AssociatedPullRequest(msgspec.Struct):
    """A pull request associated with a commit."""

    number: int
    base: BaseRef | None = None
    merge_commit_sha: str | None = None

    @property
    def base_ref(self) -> str | None:
        """Return the name of the branch the pull request targets."""
        return self.base.ref if self.base else None


class Account(msgspec.Struct):
    """GitHub account linked to a commit."""

    login: str | None = None


class CommitDetail(msgspec.Struct):
    """Commit detail; ``author`` is null when no GitHub account matches."""

    sha: str
    author: Account | None = None

    @property
    def author_login(self) -> str | None:
        """Return the GitHub login credited as the commit author."""
        return self.author.login if self.author else None
