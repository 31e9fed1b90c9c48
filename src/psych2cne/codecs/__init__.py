"""Field codecs shared by both conversion directions."""

from .color import RGB, hex_to_rgb, rgb_to_hex
from .indices import decode_indices, encode_indices

__all__ = [
    "RGB",
    "rgb_to_hex",
    "hex_to_rgb",
    "encode_indices",
    "decode_indices",
]
