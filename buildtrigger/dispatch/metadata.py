"""Parse the free-form ``metadata`` action input.

The block holds one ``key=value`` pair per line. Blank lines and lines
starting with ``#`` are ignored. Values may be empty and may contain ``=``.
"""

from __future__ import annotations

from .errors import MetadataValidationError

_COMMENT_PREFIX = "#"


def _parse_line(line: str, line_number: int) -> tuple[str, str] | str:
    """Return ``(key, value)`` for a valid line, else an issue description."""
    key, sep, value = line.partition("=")
    key = key.strip()
    if not sep:
        return f"line {line_number}: expected 'key=value', got {line!r}"
    if not key:
        return f"line {line_number}: key must be non-empty"
    if any(char.isspace() for char in key):
        return f"line {line_number}: key {key!r} must not contain whitespace"
    return key, value.strip()


def parse_metadata(block: str) -> dict[str, str]:
    """Parse a metadata block into an ordered mapping.

    Parameters
    ----------
    block : str
        Raw input text.

    Returns
    -------
    dict[str, str]
        Metadata entries in the order they appear.

    Raises
    ------
    MetadataValidationError
        Listing every malformed or duplicated entry.

    Examples
    --------
    >>> parse_metadata("suite=smoke\\nshard=1")
    {'suite': 'smoke', 'shard': '1'}

    """
    entries: dict[str, str] = {}
    issues: list[str] = []
    for line_number, raw_line in enumerate(block.splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith(_COMMENT_PREFIX):
            continue
        parsed = _parse_line(line, line_number)
        if isinstance(parsed, str):
            issues.append(parsed)
            continue
        key, value = parsed
        if key in entries:
            issues.append(f"line {line_number}: duplicate key {key!r}")
            continue
        entries[key] = value

    if issues:
        raise MetadataValidationError(issues)
    return entries
