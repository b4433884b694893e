"""Resolve the triggering event and dispatch it to the build trigger endpoint.

Run as a GitHub Actions step with ``python -m buildtrigger.cli``. Failures are
reported as ``::error::`` annotations with exit status 1.
"""

from __future__ import annotations

import argparse
import asyncio
import os
import typing as typ

import httpx
import msgspec

from buildtrigger.actions import set_failed
from buildtrigger.dispatch import (
    DispatchClient,
    DispatchConfig,
    DispatchConfigError,
    DispatchError,
    MetadataValidationError,
    build_trigger_payload,
)
from buildtrigger.events import EventContextError, read_event_description
from buildtrigger.github import GitHubRestClient, GitHubRestConfig, SafeCommitLookup
from buildtrigger.logging import (
    configure_logging,
    get_logger,
    log_exception,
    log_info,
    log_warning,
)
from buildtrigger.resolution import DEFAULT_SERVER_URL, resolve_build_context

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from buildtrigger.dispatch import TriggerPayload

logger = get_logger(__name__)

_FAILURES: tuple[type[Exception], ...] = (
    DispatchConfigError,
    MetadataValidationError,
    EventContextError,
    DispatchError,
    httpx.HTTPError,
)


async def run(
    environ: cabc.Mapping[str, str],
    *,
    dry_run: bool = False,
    http_client: httpx.AsyncClient | None = None,
) -> TriggerPayload:
    """Resolve the current event and send one trigger request.

    Parameters
    ----------
    environ
        Workflow environment holding ``GITHUB_*`` variables and action inputs.
    dry_run
        Build the payload without sending it.
    http_client
        Client shared by GitHub lookups and the dispatch request; one is
        created per component when omitted.

    Returns
    -------
    TriggerPayload
        The payload that was (or, for a dry run, would have been) sent.

    """
    config = DispatchConfig.from_env(environ)
    event = read_event_description(environ)
    log_info(
        logger,
        "Resolving %s event for %s",
        event.event_name or event.event_kind,
        event.repo_slug,
    )

    github_client: GitHubRestClient | None = None
    lookup: SafeCommitLookup | None = None
    if event.has_remote_access_token:
        github_client = GitHubRestClient(
            GitHubRestConfig.from_env(environ), http_client=http_client
        )
        lookup = SafeCommitLookup(github_client, event.repo_owner, event.repo_name)

    try:
        context = await resolve_build_context(
            event,
            lookup,
            server_url=environ.get("GITHUB_SERVER_URL", "").strip()
            or DEFAULT_SERVER_URL,
        )
    finally:
        if github_client is not None:
            await github_client.aclose()

    payload = build_trigger_payload(config, event, context)
    if dry_run:
        print(msgspec.json.encode(payload).decode("utf-8"))
        return payload

    dispatch_client = DispatchClient(config, http_client=http_client)
    try:
        await dispatch_client.send(payload)
    finally:
        await dispatch_client.aclose()
    return payload


def main(argv: list[str] | None = None) -> int:
    """Entry point for the build trigger action.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        Exit code: 0 on success, 1 when configuration or dispatch fails.

    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the trigger payload instead of sending it",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("BUILDTRIGGER_LOG_LEVEL", "INFO"),
        help="Log level (default: BUILDTRIGGER_LOG_LEVEL or INFO)",
    )
    args = parser.parse_args(argv)

    normalized_level, invalid_level = configure_logging(
        args.log_level, debug=os.environ.get("RUNNER_DEBUG") == "1"
    )
    if invalid_level:
        log_warning(
            logger,
            "Invalid log level %r, falling back to %s",
            args.log_level,
            normalized_level,
        )

    try:
        asyncio.run(run(os.environ, dry_run=args.dry_run))
    except _FAILURES as exc:
        log_exception(logger, f"Build trigger failed: {exc}", exc)
        return set_failed(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
