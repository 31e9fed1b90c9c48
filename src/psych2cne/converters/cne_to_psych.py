"""Convert a Codename Engine character (XML) to Psych Engine JSON."""

import json
import logging
import math
import re
import xml.etree.ElementTree as ET
from typing import Optional, Union

from psych2cne.codecs.color import hex_to_rgb
from psych2cne.codecs.indices import decode_indices, parse_leading_int
from psych2cne.config import DEFAULT_WATERMARK, Watermark
from psych2cne.converters.observer import NULL_OBSERVER, ConversionObserver
from psych2cne.exceptions import MissingElementError, ParseError
from psych2cne.models.character import AnimationRecord, CharacterRecord

logger = logging.getLogger(__name__)

DIRECTION = "cne2psych"
DEFAULT_COLOR = "#ffffffff"
WATERMARK_KEY = "__converter__"

_LEADING_FLOAT = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(value: Optional[str], default: Union[int, float]) -> Union[int, float]:
    """Read a leading number from an attribute value.

    Missing, unparseable and zero values give ``default``. Integral
    results come back as ``int`` so they serialize without ``.0``.
    """
    if value is None:
        return default
    match = _LEADING_FLOAT.match(value)
    if match is None:
        return default
    number = float(match.group(0))
    if number == 0 or math.isinf(number):
        return default
    return int(number) if number.is_integer() else number


def parse_int(value: Optional[str], default: int) -> int:
    """Read a leading integer from an attribute value; zero gives ``default``."""
    if value is None:
        return default
    number = parse_leading_int(value)
    return number if number else default


def _find_character(root: ET.Element) -> Optional[ET.Element]:
    if root.tag == "character":
        return root
    return root.find(".//character")


def _parse_animation(element: ET.Element) -> AnimationRecord:
    indices_attr = element.get("indices")
    return AnimationRecord(
        internal_name=element.get("anim"),
        display_name=element.get("name"),
        fps=parse_int(element.get("fps"), 24),
        loop=element.get("loop") == "true",
        offset=(parse_number(element.get("x"), 0), parse_number(element.get("y"), 0)),
        frame_indices=decode_indices(indices_attr) if indices_attr else [],
    )


def parse_cne_character(xml_text: str, observer: ConversionObserver = NULL_OBSERVER) -> CharacterRecord:
    """
    Parse a Codename Engine character document into a CharacterRecord.

    Bad attribute values fall back to defaults; only a broken document or a
    missing <character> element is fatal.

    Args:
        xml_text: XML document text
        observer: Optional progress checkpoints

    Returns:
        CharacterRecord with every field filled in

    Raises:
        ParseError: If the XML is not well-formed
        MissingElementError: If there is no <character> element
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise ParseError(f"Invalid XML format: {e}") from e

    character = _find_character(root)
    if character is None:
        raise MissingElementError("No <character> tag found.")

    antialiasing = character.get("antialiasing")
    disable_antialiasing = antialiasing.lower() != "true" if antialiasing is not None else False
    color = hex_to_rgb(character.get("color") or DEFAULT_COLOR)
    observer.on_field("healthbar_colors", color.as_list())

    animations = []
    for idx, element in enumerate(character.findall(".//anim")):
        observer.on_animation(idx, element.get("name"))
        animations.append(_parse_animation(element))
    logger.debug(f"Parsed {len(animations)} animations")

    return CharacterRecord(
        animations=animations,
        disable_antialiasing=disable_antialiasing,
        position=(parse_number(character.get("x"), 0), parse_number(character.get("y"), 0)),
        camera_offset=(parse_number(character.get("camX"), 0), parse_number(character.get("camY"), 0)),
        sing_duration=parse_number(character.get("holdTime"), 4),
        flip_x=character.get("flipX") == "true",
        scale=parse_number(character.get("scale"), 1),
        image=character.get("sprite") or "",
        health_icon=character.get("icon") or "",
        healthbar_color=(color.r, color.g, color.b),
    )


def cne_to_psych(
    xml_text: str,
    *,
    watermark: Watermark = DEFAULT_WATERMARK,
    observer: ConversionObserver = NULL_OBSERVER,
) -> str:
    """
    Convert a Codename Engine character document to Psych JSON text.

    Args:
        xml_text: XML document text
        watermark: Provenance marker stored under ``__converter__``
        observer: Optional progress checkpoints

    Returns:
        JSON text indented by two spaces

    Raises:
        ParseError: If the XML is not well-formed
        MissingElementError: If there is no <character> element
    """
    observer.on_start(DIRECTION)
    try:
        record = parse_cne_character(xml_text, observer)
    except (ParseError, MissingElementError) as e:
        observer.on_error(DIRECTION, e)
        raise

    psych = record.to_psych()
    psych[WATERMARK_KEY] = watermark.json_marker

    observer.on_complete(DIRECTION)
    return json.dumps(psych, indent=2, ensure_ascii=False)
