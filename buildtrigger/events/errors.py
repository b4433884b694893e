"""Errors raised while reading the triggering event context."""

from __future__ import annotations


class EventContextError(RuntimeError):
    """Raised when the workflow environment does not describe a usable event."""

    @classmethod
    def missing_variable(cls, name: str) -> EventContextError:
        """Return an error for a required environment variable that is unset."""
        return cls(f"{name} is required to describe the triggering event")

    @classmethod
    def invalid_repository(cls, slug: str) -> EventContextError:
        """Return an error for a malformed ``GITHUB_REPOSITORY`` value."""
        return cls(f"GITHUB_REPOSITORY must be 'owner/name', got {slug!r}")

    @classmethod
    def missing_pull_request(cls, event_name: str) -> EventContextError:
        """Return an error for a pull request event without its payload."""
        return cls(f"{event_name} event payload has no pull_request object")

    @classmethod
    def malformed_payload(cls, path: str, detail: str) -> EventContextError:
        """Return an error for an event payload that fails to decode."""
        return cls(f"Event payload at {path} is malformed: {detail}")
