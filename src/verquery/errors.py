"""Exceptions raised while querying a registry for a package version."""

from __future__ import annotations


class VersionQueryError(RuntimeError):
    """Base class for failures surfaced by :func:`verquery.query`."""


class NetworkError(VersionQueryError):
    """Raised when the registry cannot be reached."""


class RequestError(VersionQueryError):
    """Raised when the registry answers with a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str | None = None,
    ) -> None:
        """Store HTTP error context for later reporting."""
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class ParseError(VersionQueryError):
    """Raised when the registry payload lacks a usable version field."""


class VersionParseError(VersionQueryError, ValueError):
    """Raised when a string is not a valid semantic version."""

    def __init__(self, value: object) -> None:
        """Record the offending ``value``."""
        super().__init__(f"Invalid semantic version: {value!r}")
        self.value = value


class InvalidPackageNameError(VersionQueryError, ValueError):
    """Raised when a package name is rejected before any request is made."""

    def __init__(self, package: object, registry: str) -> None:
        """Record the rejected ``package`` and the registry it targeted."""
        super().__init__(f"Invalid package name for {registry}: {package!r}")
        self.package = package
        self.registry = registry


class UnknownRegistryError(ValueError):
    """Raised when a registry key does not match a known registry."""


__all__ = [
    "InvalidPackageNameError",
    "NetworkError",
    "ParseError",
    "RequestError",
    "UnknownRegistryError",
    "VersionParseError",
    "VersionQueryError",
]
