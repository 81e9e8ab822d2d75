"""Shared fixtures for verquery tests."""

from __future__ import annotations
from collections.abc import Callable, Iterator
import pytest
from verquery import config


_ENV_KEYS = (
    "VERQUERY_REGISTRY",
    "VERQUERY_TIMEOUT_SECONDS",
    "VERQUERY_USER_AGENT",
    "VERQUERY_REGISTRY_URL",
    "VERQUERY_VERSION_PATH",
)


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop VERQUERY_* env vars and cached settings around every test."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    config.get_settings(refresh=True)
    yield
    config._load_settings.cache_clear()


@pytest.fixture
def crate_payload() -> Callable[[str], dict[str, object]]:
    """Build a trimmed crates.io crate response reporting a version."""

    def _build(version: str) -> dict[str, object]:
        return {
            "crate": {
                "id": "verquery",
                "name": "verquery",
                "max_version": version,
                "max_stable_version": version,
            },
            "versions": [],
        }

    return _build
