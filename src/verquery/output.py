"""Console reporting for version queries."""

from __future__ import annotations
import logging
from typing import TextIO
import httpx
from rich.console import Console
from rich.text import Text
from verquery.client import query
from verquery.config import resolve_registry
from verquery.errors import VersionQueryError
from verquery.registry import Registry, get_registry
from verquery.status import Ahead, Behind, Equal, Status


logger = logging.getLogger(__name__)

CHECKING_MESSAGE = "Checking for later version..."


def render_status(
    package_name: str,
    current_version: str,
    status: Status,
    registry: Registry,
) -> Text:
    """Return the coloured one-line summary for ``status``."""
    match status:
        case Equal(version):
            return Text(
                f"Running the latest {package_name} version {version}",
                style="bright_green",
            )
        case Behind(version):
            return Text(
                f"The current {package_name} version {current_version} is old, "
                f"please update to {version}",
                style="bright_red",
            )
        case Ahead(version):
            return Text(
                f"The current {package_name} version {current_version} is ahead "
                f"of the {registry.display_name} version {version}",
                style="bright_magenta",
            )
    msg = f"Unsupported status: {status!r}"
    raise TypeError(msg)


def output(
    package_name: str,
    current_version: str,
    *,
    console: Console | None = None,
    registry: Registry | str | None = None,
    timeout: float | None = None,
    client: httpx.Client | None = None,
) -> Status | None:
    """Query the registry and print the outcome to ``console``.

    Query failures are reported on the console and logged instead of raised;
    ``None`` is returned in that case.
    """
    console = console or Console()
    resolved = get_registry(registry) if registry is not None else resolve_registry()

    try:
        with console.status(Text(CHECKING_MESSAGE, style="bright_yellow")):
            status = query(
                package_name,
                current_version,
                registry=resolved,
                timeout=timeout,
                client=client,
            )
    except VersionQueryError as exc:
        logger.warning(
            "Version check for %s against %s failed: %s",
            package_name,
            resolved.display_name,
            exc,
        )
        console.print(
            Text(f"Failed to query {resolved.display_name}", style="bright_yellow")
        )
        return None

    console.print(render_status(package_name, current_version, status, resolved))
    return status


def output_to_writer(
    package_name: str,
    current_version: str,
    writer: TextIO,
    *,
    registry: Registry | str | None = None,
    timeout: float | None = None,
    client: httpx.Client | None = None,
) -> Status | None:
    """Like :func:`output`, writing to any text stream (e.g. ``sys.stderr``)."""
    return output(
        package_name,
        current_version,
        console=Console(file=writer),
        registry=registry,
        timeout=timeout,
        client=client,
    )


__all__ = ["CHECKING_MESSAGE", "output", "output_to_writer", "render_status"]
