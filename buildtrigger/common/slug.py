"""Repository slug utilities.

GitHub Actions exposes the source repository as ``GITHUB_REPOSITORY`` in
``owner/name`` format. Slugs are not filesystem paths, so they are split here
rather than with ``pathlib``.
"""

from __future__ import annotations


def parse_repo_slug(slug: str) -> tuple[str, str]:
    """Parse a repository slug into owner and name.

    Parameters
    ----------
    slug:
        Repository slug in ``owner/name`` format.

    Returns
    -------
    tuple[str, str]
        ``(owner, name)``.

    Raises
    ------
    ValueError
        If the slug is not in ``owner/name`` format.

    Examples
    --------
    >>> parse_repo_slug("acme/widget")
    ('acme', 'widget')

    """
    owner, sep, name = slug.strip().partition("/")
    if not sep or not owner or not name or "/" in name:
        msg = f"Invalid repository slug: expected 'owner/name', got {slug!r}"
        raise ValueError(msg)
    return owner, name
