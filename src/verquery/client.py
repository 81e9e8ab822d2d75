"""Query a package registry and compare its latest version."""

from __future__ import annotations
import logging
from typing import Any
import httpx
from verquery.config import get_settings, resolve_registry
from verquery.errors import NetworkError, ParseError, RequestError
from verquery.registry import Registry, get_registry
from verquery.status import Status, compare
from verquery.version import SemanticVersion


logger = logging.getLogger(__name__)


def _resolve(registry: Registry | str | None) -> Registry:
    if registry is None:
        return resolve_registry()
    return get_registry(registry)


def _fetch_json(
    url: str,
    *,
    timeout: float | None,
    user_agent: str,
    client: httpx.Client | None,
) -> dict[str, Any]:
    headers = {"Accept": "application/json", "User-Agent": user_agent}
    try:
        if client is None:
            with httpx.Client(
                timeout=timeout, headers=headers, follow_redirects=True
            ) as owned:
                response = owned.get(url)
        elif timeout is None:
            response = client.get(url, headers=headers, follow_redirects=True)
        else:
            response = client.get(
                url, headers=headers, timeout=timeout, follow_redirects=True
            )
    except httpx.InvalidURL as exc:
        raise RequestError(f"Invalid registry URL {url}: {exc}", url=url) from exc
    except httpx.RequestError as exc:
        raise NetworkError(f"Failed to reach {url}: {exc}") from exc

    if not response.is_success:
        raise RequestError(
            f"Request to {url} failed with status {response.status_code}",
            status_code=response.status_code,
            url=url,
        )

    try:
        payload = response.json()
    except ValueError as exc:
        raise ParseError(f"Response from {url} is not valid JSON.") from exc
    if not isinstance(payload, dict):
        raise ParseError(f"Unexpected registry payload from {url}.")
    return payload


def fetch_latest_version(
    package_name: str,
    *,
    registry: Registry | str | None = None,
    timeout: float | None = None,
    client: httpx.Client | None = None,
) -> SemanticVersion:
    """Return the latest version of ``package_name`` published on ``registry``.

    Exactly one GET request is issued. A caller-supplied ``client`` is used
    as-is and left open, keeping its own timeout unless ``timeout`` is given;
    otherwise a client is created for this call only.
    """
    resolved = _resolve(registry)
    resolved.validate_name(package_name)
    settings = get_settings()
    if timeout is None and client is None:
        timeout = settings.TIMEOUT_SECONDS
    url = resolved.url_for(package_name)
    logger.debug("Fetching %s metadata from %s", resolved.display_name, url)
    payload = _fetch_json(
        url,
        timeout=timeout,
        user_agent=settings.USER_AGENT,
        client=client,
    )
    return SemanticVersion.parse(resolved.extract_version(payload))


def query(
    package_name: str,
    current_version: str,
    *,
    registry: Registry | str | None = None,
    timeout: float | None = None,
    client: httpx.Client | None = None,
) -> Status:
    """Compare ``current_version`` with the registry's latest release.

    Returns :class:`~verquery.status.Behind`, :class:`~verquery.status.Equal`
    or :class:`~verquery.status.Ahead`, each carrying the registry version.
    ``current_version`` is parsed before the request is made, so an invalid
    version never reaches the network.
    """
    current = SemanticVersion.parse(current_version)
    latest = fetch_latest_version(
        package_name, registry=registry, timeout=timeout, client=client
    )
    status = compare(current, latest)
    logger.debug(
        "%s %s is %s registry version %s",
        package_name,
        current,
        status.kind,
        latest,
    )
    return status


__all__ = ["fetch_latest_version", "query"]
