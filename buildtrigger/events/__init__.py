"""CI trigger event descriptions and the resolved build context."""

from __future__ import annotations

from .errors import EventContextError
from .models import (
    DeploymentInfo,
    EventDescription,
    EventKind,
    PullRequestInfo,
    PushCommit,
    ResolvedBuildContext,
)
from .reader import read_event_description

__all__ = [
    "DeploymentInfo",
    "EventContextError",
    "EventDescription",
    "EventKind",
    "PullRequestInfo",
    "PushCommit",
    "ResolvedBuildContext",
    "read_event_description",
]
