"""Unit tests for URL validation and repository slugs."""

from __future__ import annotations

import pytest

from buildtrigger.common.slug import parse_repo_slug
from buildtrigger.common.url import is_valid_url


@pytest.mark.parametrize(
    "value",
    [
        "https://example.com",
        "https://ci.example.com/builds/42?attempt=1",
        "http://localhost:8080/preview",
    ],
)
def test_valid_urls(value: str) -> None:
    """Absolute URLs with a host are valid."""
    assert is_valid_url(value) is True


@pytest.mark.parametrize(
    "value",
    ["", "builds/42", "/builds/42", "example.com/builds"],
)
def test_invalid_urls(value: str) -> None:
    """Empty and relative values are invalid."""
    assert is_valid_url(value) is False


def test_parse_repo_slug() -> None:
    """parse_repo_slug returns (owner, name)."""
    assert parse_repo_slug("acme/widget") == ("acme", "widget")


@pytest.mark.parametrize("slug", ["", "acme", "/widget", "acme/", "a/b/c"])
def test_parse_repo_slug_rejects_invalid_slugs(slug: str) -> None:
    """Malformed slugs raise ValueError."""
    with pytest.raises(ValueError, match="Invalid repository slug"):
        parse_repo_slug(slug)
