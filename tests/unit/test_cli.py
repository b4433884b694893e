"""Unit tests for the build trigger entry point."""

from __future__ import annotations

import json
import typing as typ

import httpx
import pytest

from buildtrigger import cli

if typ.TYPE_CHECKING:
    from pathlib import Path

_DEPLOY_SHA = "3333333333333333333333333333333333333333"
_DISPATCH_URL = "https://dispatch.example.test/v1/trigger"


def _environ(tmp_path: Path, **extra: str) -> dict[str, str]:
    event_path = tmp_path / "event.json"
    event_path.write_text(
        json.dumps({"deployment": {"sha": _DEPLOY_SHA, "ref": _DEPLOY_SHA}}),
        encoding="utf-8",
    )
    environ = {
        "GITHUB_EVENT_NAME": "deployment_status",
        "GITHUB_EVENT_PATH": str(event_path),
        "GITHUB_REF": "",
        "GITHUB_SHA": _DEPLOY_SHA,
        "GITHUB_REPOSITORY": "acme/widget",
        "GITHUB_ACTOR": "vercel[bot]",
        "GITHUB_API_URL": "https://api.example.test",
        "INPUT_BUILD-URL": "https://preview.example.com/42",
        "INPUT_ENVIRONMENT": "Preview",
        "INPUT_DISPATCH-URL": _DISPATCH_URL,
    }
    environ.update(extra)
    return environ


class _Recorder:
    """Route GitHub and dispatch requests to canned responses."""

    def __init__(self, *, dispatch_status: int = 200) -> None:
        self.requests: list[httpx.Request] = []
        self._dispatch_status = dispatch_status

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if str(request.url) == _DISPATCH_URL:
            return httpx.Response(self._dispatch_status, text="accepted")
        if path.endswith("/branches-where-head"):
            return httpx.Response(200, json=[])
        if path.endswith("/pulls"):
            return httpx.Response(
                200,
                json=[
                    {
                        "number": 5,
                        "merge_commit_sha": _DEPLOY_SHA,
                        "base": {"ref": "main"},
                    }
                ],
            )
        commit = {"sha": _DEPLOY_SHA, "author": {"login": "carol"}}
        return httpx.Response(200, json=commit)


@pytest.mark.asyncio
async def test_run_resolves_and_dispatches(tmp_path: Path) -> None:
    """A deployment with a SHA ref is resolved through GitHub then dispatched."""
    recorder = _Recorder()
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    try:
        await cli.run(_environ(tmp_path, GITHUB_TOKEN="tok"), http_client=http_client)
    finally:
        await http_client.aclose()

    dispatched = json.loads(recorder.requests[-1].content)
    assert dispatched["build"]["branch"] == "main"
    assert dispatched["build"]["commit"] == _DEPLOY_SHA
    assert dispatched["github_actor"] == "carol"
    assert dispatched["environment"] == "preview"
    assert [request.url.path.rsplit("/", 1)[-1] for request in recorder.requests] == [
        "branches-where-head",
        "pulls",
        _DEPLOY_SHA,
        "trigger",
    ]


@pytest.mark.asyncio
async def test_run_without_token_makes_no_github_calls(tmp_path: Path) -> None:
    """Without a token only the dispatch request is sent."""
    recorder = _Recorder()
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    try:
        payload = await cli.run(_environ(tmp_path), http_client=http_client)
    finally:
        await http_client.aclose()

    assert payload.build.branch == ""
    assert payload.github_actor == "vercel[bot]"
    assert len(recorder.requests) == 1


@pytest.fixture
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("buildtrigger.logging.basicConfig", lambda **_: None)


@pytest.mark.usefixtures("_quiet_logging")
def test_main_dry_run_prints_payload(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """--dry-run prints the payload and exits successfully."""
    for key, value in _environ(tmp_path).items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("INPUT_GITHUB-TOKEN", raising=False)

    assert cli.main(["--dry-run"]) == 0

    printed = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert printed["origin"] == {"owner": "acme", "name": "widget"}


@pytest.mark.usefixtures("_quiet_logging")
def test_main_reports_configuration_failure(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Invalid inputs fail the step with an error annotation."""
    for key, value in _environ(tmp_path).items():
        monkeypatch.setenv(key, value)
    monkeypatch.setenv("INPUT_BUILD-URL", "not a url")

    assert cli.main([]) == 1

    assert (
        "::error::Invalid config: build-url must be a valid URL."
        in capsys.readouterr().out
    )
