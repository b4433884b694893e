"""Browsable commit URLs."""

from __future__ import annotations

DEFAULT_SERVER_URL = "https://github.com"


def build_commit_url(
    owner: str, repo: str, commit_sha: str, *, server_url: str = DEFAULT_SERVER_URL
) -> str:
    """Return the web URL of ``commit_sha`` in ``owner/repo``.

    Examples
    --------
    >>> build_commit_url("acme", "widget", "abc123")
    'https://github.com/acme/widget/commit/abc123'

    """
    return f"{server_url.rstrip('/')}/{owner}/{repo}/commit/{commit_sha}"
