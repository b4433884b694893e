"""Dispatch configuration and request errors."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class DispatchConfigError(ValueError):
    """Raised when action inputs do not form a usable dispatch configuration."""

    @classmethod
    def missing_input(cls, name: str) -> DispatchConfigError:
        """Return an error for a required input that was not supplied."""
        return cls(f"Missing config parameter: {name}.")

    @classmethod
    def invalid_url(cls, name: str) -> DispatchConfigError:
        """Return an error for an input that must be an absolute URL."""
        return cls(f"Invalid config: {name} must be a valid URL.")

    @classmethod
    def missing_environment(cls) -> DispatchConfigError:
        """Return an error when neither environment nor platform is supplied."""
        return cls(
            'Missing config parameter: either of "environment" or "platform" '
            "(deprecated) needs to passed"
        )


class MetadataValidationError(ValueError):
    """Raised when the metadata block contains malformed entries."""

    def __init__(self, issues: cabc.Sequence[str]) -> None:
        """Initialise with every issue found in the block."""
        self.issues = tuple(issues)
        super().__init__("Invalid metadata: " + "; ".join(self.issues))


class DispatchError(RuntimeError):
    """Raised when the trigger endpoint rejects a dispatch request."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialise with the response body and optional HTTP status code."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def rejected(cls, status_code: int, body: str) -> DispatchError:
        """Return an error for a non-2xx trigger response."""
        message = body or f"Dispatch failed with HTTP {status_code}"
        return cls(message, status_code=status_code)
