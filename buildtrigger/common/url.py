"""URL validation for action inputs."""

from __future__ import annotations

import httpx


def is_valid_url(value: str) -> bool:
    """Return whether ``value`` parses as an absolute URL.

    An absolute URL carries both a scheme and a host. Anything httpx refuses
    to parse, and anything relative, is reported as invalid.

    Examples
    --------
    >>> is_valid_url("https://ci.example.com/builds/42")
    True
    >>> is_valid_url("builds/42")
    False

    """
    if not value:
        return False
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError):
        return False
    return bool(url.scheme) and bool(url.host)
