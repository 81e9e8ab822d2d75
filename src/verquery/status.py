"""Comparison outcome between a local version and the registry's."""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar
from verquery.version import SemanticVersion


@dataclass(frozen=True, slots=True)
class Status:
    """Base for the three comparison outcomes.

    Every variant carries the version reported by the registry.
    """

    version: SemanticVersion
    kind: ClassVar[str] = ""


@dataclass(frozen=True, slots=True)
class Behind(Status):
    """The local version is older than the registry's."""

    kind: ClassVar[str] = "behind"


@dataclass(frozen=True, slots=True)
class Equal(Status):
    """The local version matches the registry's."""

    kind: ClassVar[str] = "equal"


@dataclass(frozen=True, slots=True)
class Ahead(Status):
    """The local version is newer than the registry's."""

    kind: ClassVar[str] = "ahead"


def compare(current: SemanticVersion, latest: SemanticVersion) -> Status:
    """Classify ``current`` against the registry's ``latest`` version."""
    if current < latest:
        return Behind(latest)
    if current == latest:
        return Equal(latest)
    return Ahead(latest)


__all__ = ["Ahead", "Behind", "Equal", "Status", "compare"]
