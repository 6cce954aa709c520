"""Exceptions raised by nibver."""

from enum import StrEnum
from typing import Self


class NibverError(Exception):
    """Base exception for all nibver errors."""


class FormatErrorReason(StrEnum):
    """Why a version string could not be encoded."""

    EMPTY = "empty"
    COMPONENT_COUNT = "component_count"
    NOT_AN_INTEGER = "not_an_integer"
    OUT_OF_RANGE = "out_of_range"


class InvalidFormatError(NibverError, ValueError):
    """Raised when a version string cannot be encoded.

    Attributes:
        version: The version string that was rejected (may be None).
        reason: Which check the string failed.
        detail: The offending component or value, when there is one.
    """

    def __init__(
        self: Self,
        version: str | None,
        reason: FormatErrorReason,
        detail: str | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            version: The rejected version string.
            reason: Which check the string failed.
            detail: The offending component or value.
        """
        self.version = version
        self.reason = reason
        self.detail = detail
        super().__init__(self._build_message())

    def __reduce__(
        self: Self,
    ) -> tuple[type[Self], tuple[str | None, FormatErrorReason, str | None]]:
        """Rebuild from the structured fields so the error survives pickling."""
        return (type(self), (self.version, self.reason, self.detail))

    def _build_message(self: Self) -> str:
        match self.reason:
            case FormatErrorReason.EMPTY:
                return "Version string is null or empty"
            case FormatErrorReason.COMPONENT_COUNT:
                return (
                    f"Invalid version format {self.version!r}: expected 3 or 4 "
                    f"components, got {self.detail}"
                )
            case FormatErrorReason.NOT_AN_INTEGER:
                return (
                    f"Invalid version component {self.detail!r} in {self.version!r}"
                )
            case FormatErrorReason.OUT_OF_RANGE:
                return (
                    f"Version component out of range (0-15): {self.detail} "
                    f"in {self.version!r}"
                )


class ConfigError(NibverError):
    """Raised when a configuration file cannot be loaded."""
