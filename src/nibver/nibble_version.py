"""Models a version that fits the nibble encoding."""

from dataclasses import dataclass
from typing import Self

from .codec import (
    DEFAULT_SEPARATOR,
    decode_parts,
    encode,
    part_count,
    split_components,
)
from .exceptions import FormatErrorReason, InvalidFormatError
from .types import (
    MAX_COMPONENT,
    NIBBLE_BITS,
    NIBBLE_MASK,
    VALID_PART_COUNTS,
    Components,
    EncodedVersion,
    PartCount,
    Separator,
)


@dataclass(frozen=True)
class NibbleVersion:
    """A 3 or 4 part version whose components each fit in a nibble.

    Attributes:
        components: Version components, most significant first.
    """

    components: Components

    def __post_init__(self: Self) -> None:
        """Validate component count, type and range.

        Bools are rejected even though they subclass int.

        Raises:
            InvalidFormatError: If there are not 3 or 4 components, or one is
                not an int in [0, 15].
        """
        object.__setattr__(self, "components", tuple(self.components))
        text = ".".join(str(c) for c in self.components)
        if len(self.components) not in VALID_PART_COUNTS:
            raise InvalidFormatError(
                text, FormatErrorReason.COMPONENT_COUNT, str(len(self.components))
            )
        for component in self.components:
            if not isinstance(component, int) or isinstance(component, bool):
                raise InvalidFormatError(
                    text, FormatErrorReason.NOT_AN_INTEGER, str(component)
                )
            if not 0 <= component <= MAX_COMPONENT:
                raise InvalidFormatError(
                    text, FormatErrorReason.OUT_OF_RANGE, str(component)
                )

    @classmethod
    def parse(
        cls, version_str: str | None, separator: Separator = DEFAULT_SEPARATOR
    ) -> Self:
        """Parse a version string.

        Args:
            version_str: Version string such as "1.2.3" or "1.2.3.4".
            separator: String between components.

        Returns:
            Parsed NibbleVersion instance.

        Raises:
            InvalidFormatError: If the version string format is invalid.
        """
        encoded = encode(version_str, separator)
        count = len(split_components(version_str or "", separator))
        return cls._from_nibbles(encoded, count)

    @classmethod
    def from_int(cls, encoded: EncodedVersion) -> Self:
        """Build a version from its nibble-packed integer.

        Args:
            encoded: Nibble-packed version integer.

        Returns:
            NibbleVersion with 3 components if the top nibble is zero,
            otherwise 4.
        """
        return cls._from_nibbles(encoded, part_count(encoded))

    @classmethod
    def _from_nibbles(cls, encoded: EncodedVersion, count: int) -> Self:
        return cls(
            tuple(
                (encoded >> (i * NIBBLE_BITS)) & NIBBLE_MASK
                for i in range(count - 1, -1, -1)
            )
        )

    @property
    def part_count(self: Self) -> PartCount:
        """Number of components, 3 or 4."""
        return 3 if len(self.components) == 3 else 4  # noqa: PLR2004

    def format(self: Self, separator: Separator = DEFAULT_SEPARATOR) -> str:
        """Render the version with the given separator.

        Args:
            separator: String placed between components.

        Returns:
            The version string.
        """
        return decode_parts(self.part_count, int(self), separator)

    def __int__(self: Self) -> int:
        """Return the nibble-packed encoding."""
        encoded = 0
        for component in self.components:
            encoded = (encoded << NIBBLE_BITS) | component
        return encoded

    def __str__(self: Self) -> str:
        """Return the canonical dotted string."""
        return self.format()

    def __repr__(self: Self) -> str:
        """Return detailed string representation."""
        return f"NibbleVersion({', '.join(str(c) for c in self.components)})"
