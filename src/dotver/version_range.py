"""Half-open version ranges."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Self

from .exceptions import UnsupportedRangeError
from .types import VersionInput
from .version import Version

logger = logging.getLogger(__name__)

_SLOTS = 3
_SLOT_BASE = 10


def _counter(version: Version) -> int:
    """Return the odometer value ``major * 100 + minor * 10 + build``.

    Raises:
        UnsupportedRangeError: If the version does not fit the 3-slot decimal
            model.
    """
    if len(version.components()) > _SLOTS:
        raise UnsupportedRangeError(
            f"Cannot enumerate with bound '{version}': only major.minor.build "
            "versions are supported"
        )

    major, minor, build = version.components(_SLOTS)
    if minor >= _SLOT_BASE or build >= _SLOT_BASE:
        raise UnsupportedRangeError(
            f"Cannot enumerate with bound '{version}': minor and build components "
            f"must be below {_SLOT_BASE}"
        )
    return (major * _SLOT_BASE + minor) * _SLOT_BASE + build


def _from_counter(value: int) -> Version:
    major, rest = divmod(value, _SLOT_BASE * _SLOT_BASE)
    minor, build = divmod(rest, _SLOT_BASE)
    return Version(f"{major}.{minor}.{build}")


@dataclass(frozen=True, init=False, repr=False)
class VersionRange:
    """Half-open interval of versions, ``[start, end)``.

    The start bound is included and the end bound is excluded. Enumeration
    steps through versions as a major.minor.build odometer in which minor
    and build each run from 0 to 9.

    Attributes:
        start: Inclusive lower bound.
        end: Exclusive upper bound.

    Example:
        >>> versions = VersionRange("0.0.8", "0.1")
        >>> [str(v) for v in versions.to_list()]
        ['0.0.8', '0.0.9']
        >>> versions.include("0.0.9")
        True
    """

    start: Version
    end: Version

    def __init__(self: Self, start: VersionInput, end: VersionInput) -> None:
        """Initialize the range.

        Args:
            start: Inclusive lower bound.
            end: Exclusive upper bound.

        Raises:
            InvalidVersionError: If either bound is an invalid version string.
        """
        object.__setattr__(self, "start", Version(start))
        object.__setattr__(self, "end", Version(end))

    def include(self: Self, version: VersionInput) -> bool:
        """Check whether a version lies in the range.

        Args:
            version: Version or version string to test.

        Returns:
            True if ``start <= version < end``.

        Raises:
            InvalidVersionError: If version is an invalid version string.
        """
        candidate = Version(version)
        return candidate.compare(self.start) >= 0 and candidate.compare(self.end) < 0

    def to_list(self: Self) -> list[Version]:
        """Enumerate every version in the range.

        Returns:
            Versions from start up to but excluding end, in ascending order.

        Raises:
            UnsupportedRangeError: If a bound has more than three components,
                a minor or build component above 9, or start is after end.
        """
        first, last = self._counters()
        logger.debug("Enumerating %d versions in %r", last - first, self)
        return [_from_counter(value) for value in range(first, last)]

    def _counters(self: Self) -> tuple[int, int]:
        first = _counter(self.start)
        last = _counter(self.end)
        if first > last:
            raise UnsupportedRangeError(
                f"Cannot enumerate from '{self.start}' down to '{self.end}'"
            )
        return first, last

    def size(self: Self) -> int:
        """Return the number of versions ``to_list`` would produce.

        Raises:
            UnsupportedRangeError: If the range cannot be enumerated.
        """
        first, last = self._counters()
        return last - first

    def __contains__(self: Self, version: object) -> bool:
        if not isinstance(version, str | Version):
            return False
        return self.include(version)

    def __iter__(self: Self) -> Iterator[Version]:
        return iter(self.to_list())

    def __repr__(self: Self) -> str:
        return f"VersionRange({str(self.start)!r}, {str(self.end)!r})"
