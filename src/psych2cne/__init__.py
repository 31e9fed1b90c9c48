"""Convert rhythm-game character definitions between Psych Engine JSON and
Codename Engine XML."""

from psych2cne.codecs import RGB, decode_indices, encode_indices, hex_to_rgb, rgb_to_hex
from psych2cne.converters import (
    ConversionObserver,
    LoggingObserver,
    cne_to_psych,
    format_xml,
    psych_to_cne,
)
from psych2cne.exceptions import (
    ConversionError,
    MalformedRecordError,
    MissingElementError,
    ParseError,
    Psych2CNEError,
)
from psych2cne.models import AnimationRecord, CharacterRecord

__version__ = "1.0.0"

__all__ = [
    "psych_to_cne",
    "cne_to_psych",
    "format_xml",
    "rgb_to_hex",
    "hex_to_rgb",
    "RGB",
    "encode_indices",
    "decode_indices",
    "CharacterRecord",
    "AnimationRecord",
    "ConversionObserver",
    "LoggingObserver",
    "Psych2CNEError",
    "ConversionError",
    "ParseError",
    "MissingElementError",
    "MalformedRecordError",
]
