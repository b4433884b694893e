"""GitHub REST client used to look up branches, pull requests and commits."""

from __future__ import annotations

import dataclasses
import os
import typing as typ

import httpx
import msgspec

from buildtrigger.actions import get_input

from .errors import GitHubAPIError, GitHubConfigError, GitHubResponseShapeError
from .models import AssociatedPullRequest, Branch, CommitDetail

T = typ.TypeVar("T")

if typ.TYPE_CHECKING:
    import collections.abc as cabc

_HTTP_ERROR_STATUS_THRESHOLD = 400
_API_VERSION = "2022-11-28"
_DEFAULT_API_URL = "https://api.github.com"


class CommitLookupClient(typ.Protocol):
    """Interface for the remote queries resolution may issue for a commit."""

    async def list_branches_where_head(
        self, owner: str, repo: str, sha: str
    ) -> list[Branch]:
        """Return branches whose head commit is ``sha``."""
        ...

    async def list_pull_requests_for_commit(
        self, owner: str, repo: str, sha: str
    ) -> list[AssociatedPullRequest]:
        """Return pull requests associated with ``sha``."""
        ...

    async def get_commit(self, owner: str, repo: str, sha: str) -> CommitDetail:
        """Return commit detail for ``sha``."""
        ...


def read_github_token(environ: cabc.Mapping[str, str]) -> str:
    """Return the API token from ``GITHUB_TOKEN`` or the ``github-token`` input."""
    token = environ.get("GITHUB_TOKEN", "").strip()
    return token or get_input("github-token", environ)


@dataclasses.dataclass(frozen=True, slots=True)
class GitHubRestConfig:
    """Configuration for the GitHub REST API client."""

    token: str
    api_url: str = _DEFAULT_API_URL
    timeout_s: float = 10.0
    user_agent: str = "buildtrigger/0.1"

    @classmethod
    def from_env(
        cls, environ: cabc.Mapping[str, str] | None = None
    ) -> GitHubRestConfig:
        """Build configuration from ``GITHUB_TOKEN`` and ``GITHUB_API_URL``."""
        env = os.environ if environ is None else environ
        token = read_github_token(env)
        if not token:
            raise GitHubConfigError.missing_token()
        api_url = env.get("GITHUB_API_URL", "").strip() or _DEFAULT_API_URL
        return cls(token=token, api_url=api_url.rstrip("/"))


class GitHubRestClient:
    """GitHub REST implementation of :class:`CommitLookupClient`."""

    def __init__(
        self,
        config: GitHubRestConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialise the client with the provided API configuration."""
        if not config.token.strip():
            raise GitHubConfigError.empty_token()

        self._config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=config.timeout_s,
            headers={
                "Authorization": f"Bearer {config.token}",
                "User-Agent": config.user_agent,
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": _API_VERSION,
            },
        )

    async def aclose(self) -> None:
        """Close any owned HTTP resources."""
        if self._owns_client:
            await self._client.aclose()

    async def list_branches_where_head(
        self, owner: str, repo: str, sha: str
    ) -> list[Branch]:
        """Return branches whose head commit is ``sha``, in API order."""
        path = f"/repos/{owner}/{repo}/commits/{sha}/branches-where-head"
        return await self._get(path, list[Branch])

    async def list_pull_requests_for_commit(
        self, owner: str, repo: str, sha: str
    ) -> list[AssociatedPullRequest]:
        """Return pull requests associated with ``sha``, in API order."""
        path = f"/repos/{owner}/{repo}/commits/{sha}/pulls"
        return await self._get(path, list[AssociatedPullRequest])

    async def get_commit(self, owner: str, repo: str, sha: str) -> CommitDetail:
        """Return commit detail, including the linked author account."""
        path = f"/repos/{owner}/{repo}/commits/{sha}"
        return await self._get(path, CommitDetail)

    async def _get(self, path: str, response_type: type[T]) -> T:
        """Issue a GET request and decode the body into ``response_type``."""
        response = await self._client.get(f"{self._config.api_url}{path}")
        if response.status_code >= _HTTP_ERROR_STATUS_THRESHOLD:
            raise GitHubAPIError.http_error(response.status_code, path)
        try:
            return msgspec.json.decode(response.content, type=response_type)
        except msgspec.DecodeError as exc:
            raise GitHubResponseShapeError.invalid(path, str(exc)) from exc
