"""Query and compare a package's version against a package registry."""

from verquery.client import fetch_latest_version, query
from verquery.errors import (
    InvalidPackageNameError,
    NetworkError,
    ParseError,
    RequestError,
    UnknownRegistryError,
    VersionParseError,
    VersionQueryError,
)
from verquery.output import output, output_to_writer, render_status
from verquery.registry import CRATES_IO, NPM, PYPI, Registry, get_registry
from verquery.status import Ahead, Behind, Equal, Status, compare
from verquery.version import SemanticVersion, parse_version


__all__ = [
    "CRATES_IO",
    "NPM",
    "PYPI",
    "Ahead",
    "Behind",
    "Equal",
    "InvalidPackageNameError",
    "NetworkError",
    "ParseError",
    "Registry",
    "RequestError",
    "SemanticVersion",
    "Status",
    "UnknownRegistryError",
    "VersionParseError",
    "VersionQueryError",
    "compare",
    "fetch_latest_version",
    "get_registry",
    "output",
    "output_to_writer",
    "parse_version",
    "query",
    "render_status",
]
