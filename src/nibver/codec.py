"""Conversion between nibble-packed integers and dotted version strings.

A version such as ``1.2.3`` or ``1.2.3.4`` is packed into a 16-bit integer with
one component per 4-bit nibble, leftmost component in the most significant
nibble. A 3-part version always leaves the top nibble zero, which is how
``decode`` tells the two shapes apart.

Example:
    >>> encode("1.2.3")
    291
    >>> decode(0x1234)
    '1.2.3.4'
"""

import re
from typing import Final

from .exceptions import FormatErrorReason, InvalidFormatError
from .types import (
    HIGH_NIBBLE_SHIFT,
    MAX_COMPONENT,
    NIBBLE_BITS,
    NIBBLE_MASK,
    VALID_PART_COUNTS,
    EncodedVersion,
    PartCount,
    Separator,
    VersionString,
)

DEFAULT_SEPARATOR: Final[Separator] = "."

_INTEGER_PATTERN: Final = re.compile(r"[+-]?[0-9]+")


def part_count(encoded: EncodedVersion) -> PartCount:
    """Detect how many components an encoded version holds.

    Args:
        encoded: Nibble-packed version integer.

    Returns:
        3 if the top nibble (bits 12-15) is zero, otherwise 4.
    """
    high_nibble = (encoded >> HIGH_NIBBLE_SHIFT) & NIBBLE_MASK
    return 3 if high_nibble == 0 else 4


def decode(encoded: EncodedVersion) -> VersionString:
    """Decode a nibble-packed integer into a dotted version string.

    Args:
        encoded: Nibble-packed version integer.

    Returns:
        Version string such as "1.2.3" or "1.2.3.4".
    """
    return decode_parts(part_count(encoded), encoded, DEFAULT_SEPARATOR)


def decode_parts(
    parts: int,
    encoded: EncodedVersion,
    separator: Separator = DEFAULT_SEPARATOR,
) -> VersionString:
    """Decode a fixed number of nibbles into a version string.

    Args:
        parts: Number of components to emit, 3 or 4.
        encoded: Nibble-packed version integer.
        separator: String placed between components.

    Returns:
        The components from most to least significant nibble, joined by
        separator, with surrounding whitespace stripped.

    Raises:
        ValueError: If parts is not 3 or 4.
    """
    if parts not in VALID_PART_COUNTS:
        raise ValueError(f"parts must be 3 or 4, got {parts}")

    fields = (
        str((encoded >> (i * NIBBLE_BITS)) & NIBBLE_MASK)
        for i in range(parts - 1, -1, -1)
    )
    return separator.join(fields).strip()


def encode(
    version: VersionString | None,
    separator: Separator = DEFAULT_SEPARATOR,
) -> EncodedVersion:
    """Encode a version string into its nibble-packed integer.

    The separator is matched literally, never as a pattern.

    Args:
        version: Version string with 3 or 4 components in [0, 15].
        separator: String between components.

    Returns:
        The encoded version, leftmost component in the highest nibble.

    Raises:
        InvalidFormatError: If the string is empty, has the wrong number of
            components, or has a component that is not an integer in [0, 15].
        ValueError: If separator is empty.
    """
    if not separator:
        raise ValueError("separator must not be empty")
    if version is None or not version.strip():
        raise InvalidFormatError(version, FormatErrorReason.EMPTY)

    components = split_components(version, separator)
    if len(components) not in VALID_PART_COUNTS:
        raise InvalidFormatError(
            version, FormatErrorReason.COMPONENT_COUNT, str(len(components))
        )

    encoded = 0
    for i, component in enumerate(components):
        value = _parse_component(version, component)
        shift = (len(components) - 1 - i) * NIBBLE_BITS
        encoded |= (value & NIBBLE_MASK) << shift
    return encoded


def split_components(version: VersionString, separator: Separator) -> list[str]:
    """Split a stripped version string on a literal separator.

    Trailing empty components are dropped, so "1.2.3." splits like "1.2.3".
    Leading and inner empty components are kept.

    Args:
        version: Version string.
        separator: String between components.

    Returns:
        The components, left to right.
    """
    components = version.strip().split(separator)
    while components and not components[-1]:
        components.pop()
    return components


def _parse_component(version: VersionString, component: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(component):
        raise InvalidFormatError(version, FormatErrorReason.NOT_AN_INTEGER, component)

    value = int(component)
    if not 0 <= value <= MAX_COMPONENT:
        raise InvalidFormatError(version, FormatErrorReason.OUT_OF_RANGE, str(value))
    return value
