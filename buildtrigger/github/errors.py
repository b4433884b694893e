"""GitHub lookup errors."""

from __future__ import annotations


class GitHubAPIError(RuntimeError):
    """Raised when GitHub returns an error response."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialise with a message and optional HTTP status code."""
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def http_error(cls, status_code: int, path: str) -> GitHubAPIError:
        """Return an error for non-2xx HTTP responses."""
        return cls(
            f"GitHub REST HTTP {status_code} for {path}", status_code=status_code
        )


class GitHubResponseShapeError(RuntimeError):
    """Raised when GitHub REST responses do not match the expected shape."""

    @classmethod
    def invalid(cls, path: str, detail: str) -> GitHubResponseShapeError:
        """Return an error for a response body that fails validation."""
        msg = f"GitHub REST response for {path} has unexpected shape: {detail}"
        return cls(msg)


class GitHubConfigError(RuntimeError):
    """Raised when GitHub client configuration is invalid."""

    @classmethod
    def missing_token(cls) -> GitHubConfigError:
        """Return an error when no GitHub token is configured."""
        return cls("GITHUB_TOKEN is required for GitHub API lookups")

    @classmethod
    def empty_token(cls) -> GitHubConfigError:
        """Return an error when the provided token is empty."""
        return cls("GitHub token must be non-empty")
