"""nibver - nibble-packed integer encoding of version numbers.

Converts between a 16-bit integer holding one version component per 4-bit
nibble and its dotted string form, e.g. 0x1234 <-> "1.2.3.4".
"""

from ._version import __version__
from .codec import DEFAULT_SEPARATOR, decode, decode_parts, encode, part_count
from .config import CodecConfig, load_config
from .exceptions import (
    ConfigError,
    FormatErrorReason,
    InvalidFormatError,
    NibverError,
)
from .nibble_version import NibbleVersion
from .types import EncodedVersion, PartCount, Separator, VersionString

__all__ = [
    "DEFAULT_SEPARATOR",
    "CodecConfig",
    "ConfigError",
    "EncodedVersion",
    "FormatErrorReason",
    "InvalidFormatError",
    "NibbleVersion",
    "NibverError",
    "PartCount",
    "Separator",
    "VersionString",
    "__version__",
    "decode",
    "decode_parts",
    "encode",
    "load_config",
    "part_count",
]
