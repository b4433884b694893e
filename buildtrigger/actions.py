"""GitHub Actions runner helpers.

Action inputs arrive as ``INPUT_<NAME>`` environment variables, where the
name is upper-cased and spaces become underscores (hyphens are kept). Step
failure is signalled with the ``::error::`` workflow command plus a non-zero
exit status.
"""

from __future__ import annotations

import sys
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def input_variable_name(name: str) -> str:
    """Return the environment variable holding action input ``name``.

    Examples
    --------
    >>> input_variable_name("build-url")
    'INPUT_BUILD-URL'

    """
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, environ: cabc.Mapping[str, str]) -> str:
    """Return the trimmed value of action input ``name`` or an empty string."""
    return environ.get(input_variable_name(name), "").strip()


def _escape_command_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def error_command(message: str) -> str:
    """Format ``message`` as an ``::error::`` workflow command."""
    return f"::error::{_escape_command_data(message)}"


def set_failed(message: str, *, stream: typ.TextIO | None = None) -> int:
    """Emit a workflow error annotation and return the failing exit status."""
    print(error_command(message), file=stream or sys.stdout)
    return 1
