"""Package registries that expose version metadata over HTTP."""

from __future__ import annotations
import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote
from pydantic import BaseModel, ConfigDict, Field, field_validator
from verquery.errors import InvalidPackageNameError, ParseError, UnknownRegistryError


class Registry(BaseModel):
    """Where to find a package's metadata and which field holds its version."""

    model_config = ConfigDict(frozen=True)

    name: str
    display_name: str
    url_template: str = Field(
        description="Metadata URL with a ``{package}`` placeholder."
    )
    version_path: tuple[str, ...] = Field(
        description="Keys leading from the JSON root to the version string."
    )
    name_pattern: str = r"\S+"

    @field_validator("url_template")
    @classmethod
    def _require_placeholder(cls, value: str) -> str:
        if "{package}" not in value:
            msg = "Registry URL template must contain a '{package}' placeholder."
            raise ValueError(msg)
        return value

    @field_validator("version_path")
    @classmethod
    def _require_path(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value or not all(value):
            raise ValueError("Registry version path must not be empty.")
        return value

    @field_validator("name_pattern")
    @classmethod
    def _compile_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            msg = f"Invalid package name pattern: {exc}"
            raise ValueError(msg) from exc
        return value

    def validate_name(self, package: object) -> str:
        """Return ``package`` unchanged if the registry would accept it."""
        if not isinstance(package, str) or not package:
            raise InvalidPackageNameError(package, self.display_name)
        if re.fullmatch(self.name_pattern, package) is None:
            raise InvalidPackageNameError(package, self.display_name)
        return package

    def url_for(self, package: str) -> str:
        """Return the metadata URL for ``package``."""
        return self.url_template.format(package=quote(package, safe="@"))

    def extract_version(self, payload: Any) -> str:
        """Walk ``version_path`` through ``payload`` and return the version."""
        node = payload
        for key in self.version_path:
            if not isinstance(node, Mapping) or key not in node:
                dotted = ".".join(self.version_path)
                msg = f"{self.display_name} response is missing '{dotted}'."
                raise ParseError(msg)
            node = node[key]
        if not isinstance(node, str) or not node.strip():
            dotted = ".".join(self.version_path)
            msg = f"{self.display_name} response field '{dotted}' is not a version."
            raise ParseError(msg)
        return node


CRATES_IO = Registry(
    name="crates_io",
    display_name="crates.io",
    url_template="https://crates.io/api/v1/crates/{package}",
    version_path=("crate", "max_version"),
    name_pattern=r"[A-Za-z][A-Za-z0-9_-]{0,63}",
)

PYPI = Registry(
    name="pypi",
    display_name="PyPI",
    url_template="https://pypi.org/pypi/{package}/json",
    version_path=("info", "version"),
    name_pattern=r"[A-Za-z0-9](?:[A-Za-z0-9._-]*[A-Za-z0-9])?",
)

NPM = Registry(
    name="npm",
    display_name="npm",
    url_template="https://registry.npmjs.org/{package}/latest",
    version_path=("version",),
    name_pattern=r"(?:@[a-z0-9~-][a-z0-9._~-]*/)?[a-z0-9~-][a-z0-9._~-]*",
)

REGISTRIES: dict[str, Registry] = {
    registry.name: registry for registry in (CRATES_IO, PYPI, NPM)
}
DEFAULT_REGISTRY = CRATES_IO.name


def _normalize_key(value: str) -> str:
    return value.strip().lower().replace("-", "_").replace(".", "_")


def get_registry(registry: Registry | str) -> Registry:
    """Resolve a registry key such as ``"pypi"`` to a :class:`Registry`."""
    if isinstance(registry, Registry):
        return registry
    key = _normalize_key(registry)
    try:
        return REGISTRIES[key]
    except KeyError:
        known = ", ".join(sorted(REGISTRIES))
        msg = f"Unknown registry {registry!r}; expected one of: {known}."
        raise UnknownRegistryError(msg) from None


__all__ = [
    "CRATES_IO",
    "DEFAULT_REGISTRY",
    "NPM",
    "PYPI",
    "REGISTRIES",
    "Registry",
    "get_registry",
]
