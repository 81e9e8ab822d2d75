"""Semantic version value type."""

from __future__ import annotations
from dataclasses import dataclass, field
import semver
from verquery.errors import VersionParseError


@dataclass(frozen=True, slots=True, order=True)
class SemanticVersion:
    """A ``MAJOR.MINOR.PATCH`` version.

    Ordering and equality only look at the numeric triple. Pre-release and
    build suffixes are kept so the value renders back to its original form.
    """

    major: int
    minor: int
    patch: int
    prerelease: str | None = field(default=None, compare=False)
    build: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Reject negative components."""
        for component in (self.major, self.minor, self.patch):
            if component < 0:
                raise VersionParseError(self.as_tuple())

    @classmethod
    def parse(cls, value: object) -> SemanticVersion:
        """Parse ``value`` or raise :class:`VersionParseError`."""
        # semver's pattern accepts any Unicode digit; versions are ASCII only.
        if not isinstance(value, str) or not value.isascii():
            raise VersionParseError(value)
        try:
            parsed = semver.Version.parse(value.strip())
        except (TypeError, ValueError) as exc:
            raise VersionParseError(value) from exc
        return cls(
            major=parsed.major,
            minor=parsed.minor,
            patch=parsed.patch,
            prerelease=parsed.prerelease,
            build=parsed.build,
        )

    def as_tuple(self) -> tuple[int, int, int]:
        """Return the ``(major, minor, patch)`` triple."""
        return (self.major, self.minor, self.patch)

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.build:
            text += f"+{self.build}"
        return text


def parse_version(value: object) -> SemanticVersion:
    """Shorthand for :meth:`SemanticVersion.parse`."""
    return SemanticVersion.parse(value)


__all__ = ["SemanticVersion", "parse_version"]
