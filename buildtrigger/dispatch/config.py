"""Dispatch configuration read from GitHub Actions inputs.

Inputs
------
- ``build-url`` (required): URL of the build under test.
- ``environment``: target environment; required unless ``platform`` is set.
- ``platform`` (deprecated): superseded by ``environment``.
- ``auth-key``: bearer token sent to the trigger endpoint.
- ``metadata``: ``key=value`` lines forwarded verbatim.
- ``dispatch-url``: trigger endpoint override.
- ``slack-webhook-url``: no longer supported; ignored with a warning.

"""

from __future__ import annotations

import dataclasses as dc
import os
import typing as typ

from buildtrigger.actions import get_input
from buildtrigger.common.url import is_valid_url
from buildtrigger.logging import get_logger, log_info, log_warning

from .errors import DispatchConfigError
from .metadata import parse_metadata

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = get_logger(__name__)

DEFAULT_DISPATCH_URL = "https://dispatch.empirical.run/v1/trigger"


def _read_url_input(environ: cabc.Mapping[str, str], name: str) -> str:
    value = get_input(name, environ)
    if value and not is_valid_url(value):
        raise DispatchConfigError.invalid_url(name)
    return value


@dc.dataclass(frozen=True, slots=True)
class DispatchConfig:
    """Validated settings for one dispatch request.

    Attributes
    ----------
    build_url
        Absolute URL of the build to test.
    environment
        Lower-cased environment name; empty when only ``platform`` was given.
    platform
        Deprecated platform name, or ``None``.
    auth_key
        Bearer token for the trigger endpoint, or ``None``.
    metadata
        Parsed ``metadata`` entries.
    dispatch_url
        Trigger endpoint.
    timeout_s
        HTTP timeout for the dispatch request.

    """

    build_url: str
    environment: str = ""
    platform: str | None = None
    auth_key: str | None = None
    metadata: dict[str, str] = dc.field(default_factory=dict)
    dispatch_url: str = DEFAULT_DISPATCH_URL
    timeout_s: float = 30.0

    @classmethod
    def from_env(
        cls, environ: cabc.Mapping[str, str] | None = None
    ) -> DispatchConfig:
        """Create configuration from action inputs.

        Raises
        ------
        DispatchConfigError
            If ``build-url`` is missing or invalid, ``dispatch-url`` is
            invalid, or neither ``environment`` nor ``platform`` is set.
        MetadataValidationError
            If the ``metadata`` block is malformed.

        """
        env = os.environ if environ is None else environ

        build_url = get_input("build-url", env)
        if not build_url:
            raise DispatchConfigError.missing_input("build-url")
        if not is_valid_url(build_url):
            raise DispatchConfigError.invalid_url("build-url")

        if get_input("slack-webhook-url", env):
            log_warning(
                logger,
                "Warning: slack-webhook-url is not a supported input, "
                "and will be ignored.",
            )

        platform = get_input("platform", env)
        if platform:
            log_warning(
                logger,
                "Warning: platform is a deprecated input, "
                "you should use environment instead.",
            )
        environment = get_input("environment", env)
        if not platform and not environment:
            raise DispatchConfigError.missing_environment()

        auth_key = get_input("auth-key", env)
        if auth_key:
            log_info(logger, "Setting an auth header for the request.")

        return cls(
            build_url=build_url,
            environment=environment.lower(),
            platform=platform or None,
            auth_key=auth_key or None,
            metadata=parse_metadata(get_input("metadata", env)),
            dispatch_url=_read_url_input(env, "dispatch-url") or DEFAULT_DISPATCH_URL,
        )
