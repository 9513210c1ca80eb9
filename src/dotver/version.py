"""Dotted-numeric version value type."""

from dataclasses import dataclass
from typing import Any, Self

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, core_schema

from .exceptions import InvalidVersionError
from .types import Components

_DIGITS = frozenset("0123456789")


def _scan_groups(version_string: str) -> list[str]:
    """Split a version string into digit groups, enforcing the grammar.

    A valid string is empty or one or more groups of ASCII digits separated
    by single dots.

    Args:
        version_string: Raw input string.

    Returns:
        The digit groups in order, empty for the empty string.

    Raises:
        InvalidVersionError: If the string violates the grammar.
    """
    if version_string == "":
        return []

    groups: list[str] = []
    group_start = 0
    for index, char in enumerate(version_string):
        if char == ".":
            if index == group_start:
                raise InvalidVersionError(version_string)
            groups.append(version_string[group_start:index])
            group_start = index + 1
        elif char not in _DIGITS:
            raise InvalidVersionError(version_string)

    if group_start == len(version_string):
        raise InvalidVersionError(version_string)
    groups.append(version_string[group_start:])
    return groups


def _canonical(parts: list[int]) -> tuple[int, ...]:
    end = len(parts)
    while end and parts[end - 1] == 0:
        end -= 1
    return tuple(parts[:end])


@dataclass(frozen=True, init=False, repr=False)
class Version:
    """Dotted-numeric version such as ``1.4.9.16``.

    Versions are stored in canonical form, with trailing zero components
    removed, so ``Version("1.2.0")`` and ``Version("1.2")`` are the same
    value. The empty string and any all-zero string give the zero version,
    which has no components and renders as ``""``.

    Ordering pads the shorter version with zeros and compares components
    numerically, so ``1.5 > 1.4.9.16`` and ``1.4.9.16.0.0 == 1.4.9.16``.

    Example:
        >>> Version("1.4.9.16").components(6)
        [1, 4, 9, 16, 0, 0]
        >>> Version("1.5") > Version("1.4.9.16")
        True
        >>> str(Version("0.1.0.2.0"))
        '0.1.0.2'
    """

    _components: tuple[int, ...]

    def __init__(self: Self, value: "str | Version" = "") -> None:
        """Parse and validate a version.

        Args:
            value: Version string, or an existing Version to copy.

        Raises:
            InvalidVersionError: If the string is not a valid version.
            TypeError: If value is neither a string nor a Version.
        """
        if isinstance(value, Version):
            value = str(value)
        elif not isinstance(value, str):
            raise TypeError(
                f"Version expects a str or Version, got {type(value).__name__}"
            )

        groups = _scan_groups(value)
        try:
            parts = [int(group) for group in groups]
        except ValueError as e:
            # Groups longer than sys.get_int_max_str_digits()
            raise InvalidVersionError(value) from e

        object.__setattr__(self, "_components", _canonical(parts))

    @classmethod
    def parse(cls, value: "str | Version") -> Self:
        """Parse a version string.

        Args:
            value: Version string or Version instance.

        Returns:
            Parsed Version instance.

        Raises:
            InvalidVersionError: If the string is not a valid version.
        """
        return cls(value)

    def components(self: Self, length: int | None = None) -> Components:
        """Return the version components as a new list.

        Args:
            length: If given, truncate or zero-pad the result to exactly this
                many components.

        Returns:
            Canonical components, or exactly ``length`` components.

        Raises:
            ValueError: If length is negative.
        """
        if length is None:
            return list(self._components)
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")

        padded = list(self._components[:length])
        padded.extend([0] * (length - len(padded)))
        return padded

    def compare(self: Self, other: "str | Version") -> int:
        """Compare with another version.

        Args:
            other: Version or version string to compare against.

        Returns:
            -1 if this version is lower, 0 if equal, 1 if higher.

        Raises:
            InvalidVersionError: If other is an invalid version string.
        """
        if not isinstance(other, Version):
            other = Version(other)

        length = max(len(self._components), len(other._components))
        for mine, theirs in zip(
            self.components(length), other.components(length), strict=True
        ):
            if mine != theirs:
                return -1 if mine < theirs else 1
        return 0

    def __lt__(self: Self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self: Self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self: Self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self: Self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __hash__(self: Self) -> int:
        return hash(self._components)

    def __bool__(self: Self) -> bool:
        return bool(self._components)

    def __str__(self: Self) -> str:
        """Return the canonical version string.

        Returns:
            Components joined with dots, empty for the zero version.
        """
        return ".".join(str(part) for part in self._components)

    def __repr__(self: Self) -> str:
        return f"Version({str(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Allow Version to be used as a Pydantic field type.

        Strings are validated with the version grammar and serialized back
        in canonical form.
        """
        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_after_validator_function(
                cls, core_schema.str_schema()
            ),
            python_schema=core_schema.no_info_plain_validator_function(
                cls._validate
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def _validate(cls, value: Any) -> Self:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str | Version):
            raise PydanticCustomError(
                "version_type",
                "Input should be a version string or Version, got {input_type}",
                {"input_type": type(value).__name__},
            )
        return cls(value)
