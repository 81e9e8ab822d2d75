"""Tests for console reporting."""

from __future__ import annotations
import io
import logging
from collections.abc import Callable
import httpx
import pytest
import respx
from rich.console import Console
from verquery import (
    CRATES_IO,
    Ahead,
    Behind,
    Equal,
    SemanticVersion,
    output,
    output_to_writer,
    render_status,
)


CRATE_URL = "https://crates.io/api/v1/crates/verquery"
PayloadFactory = Callable[[str], dict[str, object]]


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


def test_render_status_messages_and_styles() -> None:
    latest = SemanticVersion(1, 2, 3)

    equal = render_status("verquery", "1.2.3", Equal(latest), CRATES_IO)
    behind = render_status("verquery", "1.2.2", Behind(latest), CRATES_IO)
    ahead = render_status("verquery", "1.2.4", Ahead(latest), CRATES_IO)

    assert equal.plain == "Running the latest verquery version 1.2.3"
    assert equal.style == "bright_green"
    assert behind.plain == (
        "The current verquery version 1.2.2 is old, please update to 1.2.3"
    )
    assert behind.style == "bright_red"
    assert ahead.plain == (
        "The current verquery version 1.2.4 is ahead of the crates.io version 1.2.3"
    )
    assert ahead.style == "bright_magenta"


def test_output_prints_status(crate_payload: PayloadFactory) -> None:
    console, buffer = _console()
    with respx.mock(assert_all_called=True) as router:
        router.get(CRATE_URL).mock(
            return_value=httpx.Response(200, json=crate_payload("2.1.0"))
        )
        status = output("verquery", "2.0.0", console=console)

    assert status == Behind(SemanticVersion(2, 1, 0))
    assert "please update to 2.1.0" in buffer.getvalue()


def test_output_soft_fails_and_logs(caplog: pytest.LogCaptureFixture) -> None:
    console, buffer = _console()
    with respx.mock(assert_all_called=True) as router:
        router.get(CRATE_URL).mock(return_value=httpx.Response(404))
        with caplog.at_level(logging.WARNING, logger="verquery.output"):
            status = output("verquery", "2.0.0", console=console)

    assert status is None
    assert "Failed to query crates.io" in buffer.getvalue()
    assert "Version check for verquery against crates.io failed" in caplog.text


def test_output_reports_invalid_current_version() -> None:
    console, buffer = _console()
    with respx.mock(assert_all_called=False) as router:
        route = router.get(CRATE_URL).mock(return_value=httpx.Response(500))
        status = output("verquery", "two", console=console)

    assert status is None
    assert not route.called
    assert "Failed to query crates.io" in buffer.getvalue()


def test_output_to_writer_targets_stream() -> None:
    buffer = io.StringIO()
    with respx.mock(assert_all_called=True) as router:
        router.get("https://registry.npmjs.org/left-pad/latest").mock(
            return_value=httpx.Response(200, json={"version": "1.3.0"})
        )
        status = output_to_writer("left-pad", "1.4.0", buffer, registry="npm")

    assert status == Ahead(SemanticVersion(1, 3, 0))
    assert "ahead of the npm version 1.3.0" in buffer.getvalue()


def test_output_soft_fails_on_oversized_registry_version(
    crate_payload: PayloadFactory,
) -> None:
    console, buffer = _console()
    with respx.mock(assert_all_called=True) as router:
        router.get(CRATE_URL).mock(
            return_value=httpx.Response(200, json=crate_payload("1.2." + "9" * 5000))
        )
        status = output("verquery", "1.0.0", console=console)

    assert status is None
    assert "Failed to query crates.io" in buffer.getvalue()


def test_output_to_writer_forwards_client_and_timeout() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"info": {"version": "2.0.0"}})

    buffer = io.StringIO()
    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        status = output_to_writer(
            "demo", "2.0.0", buffer, registry="pypi", timeout=3.0, client=client
        )

    assert status == Equal(SemanticVersion(2, 0, 0))
    assert seen[0].extensions["timeout"]["read"] == 3.0
    assert "Running the latest demo version 2.0.0" in buffer.getvalue()


def test_output_to_writer_does_not_accept_console() -> None:
    with pytest.raises(TypeError):
        output_to_writer(  # type: ignore[call-arg]
            "verquery", "1.0.0", io.StringIO(), console=Console()
        )
