"""Resolvers deriving canonical build facts from a CI trigger event."""

from __future__ import annotations

from .actor import ACTOR_STRATEGIES, resolve_actor
from .branch import BRANCH_STRATEGIES, branch_from_ref, resolve_branch_name
from .commit import resolve_commit_sha
from .fallback import FallbackStrategy, first_answer
from .service import resolve_build_context
from .urls import DEFAULT_SERVER_URL, build_commit_url

__all__ = [
    "ACTOR_STRATEGIES",
    "BRANCH_STRATEGIES",
    "DEFAULT_SERVER_URL",
    "FallbackStrategy",
    "branch_from_ref",
    "build_commit_url",
    "first_answer",
    "resolve_actor",
    "resolve_branch_name",
    "resolve_build_context",
    "resolve_commit_sha",
]
