"""Unit tests for the GitHub REST client."""

from __future__ import annotations

import secrets
import typing as typ

import httpx
import pytest

from buildtrigger.github import GitHubRestClient, GitHubRestConfig
from buildtrigger.github.errors import (
    GitHubAPIError,
    GitHubConfigError,
    GitHubResponseShapeError,
)

_TOKEN = secrets.token_hex(8)
_SHA = "abc123"


def _make_client(
    status: int, payload: object
) -> tuple[GitHubRestClient, httpx.AsyncClient, list[httpx.Request]]:
    requests: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code=status, json=payload)

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(_handler))
    client = GitHubRestClient(
        GitHubRestConfig(token=_TOKEN, api_url="https://example.test/api"),
        http_client=http_client,
    )
    return client, http_client, requests


@pytest.mark.asyncio
async def test_list_branches_where_head_preserves_order() -> None:
    """Branches come back in API order from the branches-where-head endpoint."""
    client, http_client, requests = _make_client(
        200,
        [
            {"name": "main", "commit": {"sha": _SHA}, "protected": True},
            {"name": "release", "commit": {"sha": _SHA}, "protected": False},
        ],
    )
    try:
        branches = await client.list_branches_where_head("acme", "widget", _SHA)
    finally:
        await http_client.aclose()

    assert [branch.name for branch in branches] == ["main", "release"]
    assert str(requests[0].url) == (
        f"https://example.test/api/repos/acme/widget/commits/{_SHA}/branches-where-head"
    )


@pytest.mark.asyncio
async def test_list_pull_requests_for_commit_decodes_base_and_merge_sha() -> None:
    """Associated pull requests carry their base ref and merge commit."""
    client, http_client, requests = _make_client(
        200,
        [
            {
                "number": 12,
                "state": "closed",
                "merge_commit_sha": _SHA,
                "base": {"ref": "main", "sha": "def456"},
                "head": {"ref": "feature/x", "sha": "987"},
            },
            {"number": 13, "merge_commit_sha": None, "base": {"ref": "develop"}},
        ],
    )
    try:
        pulls = await client.list_pull_requests_for_commit("acme", "widget", _SHA)
    finally:
        await http_client.aclose()

    assert [(pr.number, pr.base_ref, pr.merge_commit_sha) for pr in pulls] == [
        (12, "main", _SHA),
        (13, "develop", None),
    ]
    assert requests[0].url.path == f"/api/repos/acme/widget/commits/{_SHA}/pulls"


@pytest.mark.asyncio
async def test_get_commit_reads_author_login() -> None:
    """Commit detail exposes the linked author login."""
    client, http_client, _ = _make_client(
        200,
        {
            "sha": _SHA,
            "commit": {"author": {"name": "Carol"}},
            "author": {"login": "carol", "id": 1},
        },
    )
    try:
        commit = await client.get_commit("acme", "widget", _SHA)
    finally:
        await http_client.aclose()

    assert commit.author_login == "carol"


@pytest.mark.asyncio
async def test_get_commit_handles_unlinked_author() -> None:
    """A null author means no GitHub account is linked."""
    client, http_client, _ = _make_client(200, {"sha": _SHA, "author": None})
    try:
        commit = await client.get_commit("acme", "widget", _SHA)
    finally:
        await http_client.aclose()

    assert commit.author_login is None


@pytest.mark.asyncio
async def test_http_error_status_raises() -> None:
    """Non-2xx responses raise GitHubAPIError with the status code."""
    client, http_client, _ = _make_client(404, {"message": "Not Found"})
    try:
        with pytest.raises(GitHubAPIError) as exc:
            await client.get_commit("acme", "widget", _SHA)
    finally:
        await http_client.aclose()

    assert exc.value.status_code == 404


@pytest.mark.asyncio
async def test_unexpected_shape_raises() -> None:
    """Bodies that do not match the expected model raise a shape error."""
    client, http_client, _ = _make_client(200, {"message": "not a list"})
    try:
        with pytest.raises(GitHubResponseShapeError):
            await client.list_branches_where_head("acme", "widget", _SHA)
    finally:
        await http_client.aclose()


def test_empty_token_is_rejected() -> None:
    """Clients refuse to start without a token."""
    with pytest.raises(GitHubConfigError):
        GitHubRestClient(GitHubRestConfig(token="  "))


@pytest.mark.parametrize(
    ("environ", "expected_token", "expected_url"),
    [
        ({"GITHUB_TOKEN": "tok"}, "tok", "https://api.github.com"),
        (
            {"INPUT_GITHUB-TOKEN": " input-tok ", "GITHUB_API_URL": "https://g/api/"},
            "input-tok",
            "https://g/api",
        ),
    ],
)
def test_config_from_env(
    environ: dict[str, str], expected_token: str, expected_url: str
) -> None:
    """Configuration reads the token and API URL from the environment."""
    config = GitHubRestConfig.from_env(environ)

    assert config.token == expected_token
    assert config.api_url == expected_url


def test_config_from_env_requires_token() -> None:
    """A missing token is a configuration error."""
    environ: dict[str, typ.Any] = {}
    with pytest.raises(GitHubConfigError, match="GITHUB_TOKEN"):
        GitHubRestConfig.from_env(environ)
