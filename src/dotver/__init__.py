"""dotver - dotted-numeric versions and half-open version ranges.

A package for parsing, comparing and enumerating plain dotted-integer
versions such as ``1.4.9.16``.
"""

from ._version import __version__
from .exceptions import (
    ConfigError,
    DotverError,
    InvalidVersionError,
    UnsupportedRangeError,
)
from .types import Components, VersionInput
from .version import Version
from .version_range import VersionRange

__all__ = [
    "Components",
    "ConfigError",
    "DotverError",
    "InvalidVersionError",
    "UnsupportedRangeError",
    "Version",
    "VersionInput",
    "VersionRange",
    "__version__",
]
