"""Type aliases needed in the package."""

from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from .version import Version

Components: TypeAlias = list[int]
VersionInput: TypeAlias = "str | Version"
