"""Runtime configuration helpers for verquery."""

from __future__ import annotations
from functools import lru_cache
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version
from dynaconf import Dynaconf
from pydantic import ValidationError
from verquery.errors import UnknownRegistryError
from verquery.registry import DEFAULT_REGISTRY, Registry, get_registry


_PROJECT_URL = "https://github.com/verquery/verquery"

_DEFAULTS: dict[str, object] = {
    "REGISTRY": DEFAULT_REGISTRY,
    "TIMEOUT_SECONDS": 5.0,
    "USER_AGENT": None,
    "REGISTRY_URL": None,
    "VERSION_PATH": None,
}


def _read_own_version() -> str | None:
    try:
        return package_version("verquery")
    except PackageNotFoundError:
        return None


def default_user_agent() -> str:
    """Return the User-Agent sent to registries (crates.io requires one)."""
    return f"verquery/{_read_own_version() or 'dev'} (+{_PROJECT_URL})"


def _build_loader() -> Dynaconf:
    """Create a Dynaconf loader wired to environment variables only."""
    return Dynaconf(
        envvar_prefix="VERQUERY",
        settings_files=[],  # No config files, env vars only
        load_dotenv=True,
        environments=False,
    )


def _normalize_settings(source: Dynaconf) -> Dynaconf:
    """Validate and fill defaults on the raw Dynaconf settings."""
    normalized = Dynaconf(
        envvar_prefix="VERQUERY",
        settings_files=[],
        load_dotenv=False,
        environments=False,
    )

    registry_raw = source.get("REGISTRY") or _DEFAULTS["REGISTRY"]
    try:
        registry = get_registry(str(registry_raw))
    except UnknownRegistryError as exc:
        raise ValueError(f"VERQUERY_REGISTRY is invalid: {exc}") from exc
    normalized.set("REGISTRY", registry.name)

    timeout_raw = source.get("TIMEOUT_SECONDS", _DEFAULTS["TIMEOUT_SECONDS"])
    if timeout_raw is None:
        timeout_raw = _DEFAULTS["TIMEOUT_SECONDS"]
    try:
        timeout = float(timeout_raw)
    except (TypeError, ValueError) as exc:
        raise ValueError("VERQUERY_TIMEOUT_SECONDS must be a number.") from exc
    if timeout <= 0:
        raise ValueError("VERQUERY_TIMEOUT_SECONDS must be greater than zero.")
    normalized.set("TIMEOUT_SECONDS", timeout)

    user_agent = source.get("USER_AGENT") or default_user_agent()
    normalized.set("USER_AGENT", str(user_agent))

    registry_url = source.get("REGISTRY_URL")
    version_path = source.get("VERSION_PATH")
    if registry_url:
        if "{package}" not in str(registry_url):
            msg = "VERQUERY_REGISTRY_URL must contain a '{package}' placeholder."
            raise ValueError(msg)
        normalized.set("REGISTRY_URL", str(registry_url))
        normalized.set("VERSION_PATH", str(version_path) if version_path else None)
    else:
        normalized.set("REGISTRY_URL", None)
        normalized.set("VERSION_PATH", None)

    return normalized


@lru_cache(maxsize=1)
def _load_settings() -> Dynaconf:
    """Load settings once and cache the normalized Dynaconf instance."""
    return _normalize_settings(_build_loader())


def get_settings(*, refresh: bool = False) -> Dynaconf:
    """Return the cached Dynaconf settings, reloading them if requested."""
    if refresh:
        _load_settings.cache_clear()
    return _load_settings()


def resolve_registry(settings: Dynaconf | None = None) -> Registry:
    """Return the registry selected by ``settings``.

    ``VERQUERY_REGISTRY_URL`` overrides the endpoint of the selected registry;
    ``VERQUERY_VERSION_PATH`` (dot separated) overrides where the version is
    read from.
    """
    settings = settings if settings is not None else get_settings()
    registry = get_registry(settings.REGISTRY)
    registry_url = settings.get("REGISTRY_URL")
    if not registry_url:
        return registry

    updates: dict[str, object] = {"url_template": registry_url}
    version_path = settings.get("VERSION_PATH")
    if version_path:
        updates["version_path"] = tuple(version_path.split("."))
    try:
        return Registry.model_validate(registry.model_dump() | updates)
    except ValidationError as exc:
        raise ValueError(f"Invalid custom registry configuration: {exc}") from exc


__all__ = ["default_user_agent", "get_settings", "resolve_registry"]
