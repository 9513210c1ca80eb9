"""Exceptions raised by dotver."""


class DotverError(Exception):
    """Base exception for all dotver errors."""


class InvalidVersionError(DotverError, ValueError):
    """Raised when a string does not match the dotted-numeric version grammar.

    Attributes:
        version_string: The exact input that failed validation.
    """

    def __init__(self, version_string: str) -> None:
        """Initialize the error with the offending input.

        Args:
            version_string: The rejected version string.
        """
        self.version_string = version_string
        super().__init__(f"Invalid version string '{version_string}'")


class UnsupportedRangeError(DotverError, ValueError):
    """Raised when a range cannot be enumerated with the major.minor.build model."""


class ConfigError(DotverError):
    """Raised when CLI configuration cannot be loaded."""
