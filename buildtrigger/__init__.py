"""Resolve CI event metadata and forward it to a build trigger endpoint."""

from __future__ import annotations

from .events.models import EventDescription, EventKind, ResolvedBuildContext
from .resolution.service import resolve_build_context

__all__ = [
    "EventDescription",
    "EventKind",
    "ResolvedBuildContext",
    "resolve_build_context",
]
