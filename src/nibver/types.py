"""Type aliases and constants needed in the package."""

from typing import Final, Literal, TypeAlias

EncodedVersion: TypeAlias = int
VersionString: TypeAlias = str
Separator: TypeAlias = str
PartCount: TypeAlias = Literal[3, 4]
Components: TypeAlias = tuple[int, ...]

NIBBLE_BITS: Final = 4
NIBBLE_MASK: Final = 0xF
MAX_COMPONENT: Final = NIBBLE_MASK
VALID_PART_COUNTS: Final[tuple[int, ...]] = (3, 4)
HIGH_NIBBLE_SHIFT: Final = 12
