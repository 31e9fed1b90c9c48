"""Convert a Psych Engine character (JSON) to Codename Engine XML."""

import logging
from typing import Any, Mapping, Union
from xml.sax.saxutils import escape

from pydantic import ValidationError as PydanticValidationError

from psych2cne.codecs.color import rgb_to_hex
from psych2cne.codecs.indices import encode_indices
from psych2cne.config import DEFAULT_WATERMARK, Watermark
from psych2cne.converters.observer import NULL_OBSERVER, ConversionObserver
from psych2cne.converters.xml_format import format_xml
from psych2cne.exceptions import MalformedRecordError
from psych2cne.models.character import AnimationRecord, CharacterRecord

logger = logging.getLogger(__name__)

DIRECTION = "psych2cne"
DOCTYPE = "<!DOCTYPE codename-engine-character>"
SPRITE_PREFIX = "characters/"
INDENT_UNIT = "  "


def format_value(value: Any) -> str:
    """Write a value the way CNE character files spell it.

    Booleans are lowercase and integral floats drop the ``.0``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if value is None:
        return ""
    return str(value)


def _attr(name: str, value: Any) -> str:
    escaped = escape(format_value(value), {'"': "&quot;"})
    return f' {name}="{escaped}"'


def _anim_tag(anim: AnimationRecord) -> str:
    tag = "<anim"
    tag += _attr("name", anim.display_name)
    tag += _attr("anim", anim.internal_name)
    if anim.fps != 24:
        tag += _attr("fps", anim.fps)
    tag += _attr("loop", anim.loop)
    offset_x, offset_y = anim.offset
    tag += _attr("x", offset_x) + _attr("y", offset_y)

    indices = encode_indices(anim.frame_indices)
    if indices:
        tag += _attr("indices", indices)
    return tag + "/>"


def _coerce_record(record: Union[CharacterRecord, Mapping[str, Any]]) -> CharacterRecord:
    if isinstance(record, CharacterRecord):
        return record
    try:
        return CharacterRecord.from_psych(record)
    except PydanticValidationError as e:
        raise MalformedRecordError(f"Invalid Psych character data: {e}") from e


def psych_to_cne(
    record: Union[CharacterRecord, Mapping[str, Any]],
    root_attributes: str = "",
    *,
    watermark: Watermark = DEFAULT_WATERMARK,
    observer: ConversionObserver = NULL_OBSERVER,
) -> str:
    """
    Convert a Psych character to a formatted Codename Engine XML document.

    Attributes equal to their CNE default (zero position, scale 1, fps 24)
    are left out. Animation order is kept.

    Args:
        record: CharacterRecord, or a parsed Psych JSON object
        root_attributes: Attribute text spliced verbatim into <character>
            (e.g. 'isPlayer="true"'); not validated
        watermark: Provenance comment written after the doctype
        observer: Optional progress checkpoints

    Returns:
        Indented XML string

    Raises:
        MalformedRecordError: If a mapping does not have the shape of a
            Psych character (e.g. position is not a pair)
    """
    observer.on_start(DIRECTION)
    try:
        character = _coerce_record(record)
    except MalformedRecordError as e:
        observer.on_error(DIRECTION, e)
        raise

    color = rgb_to_hex(*character.healthbar_color)
    observer.on_field("color", color)

    out = f"{DOCTYPE}\n{watermark.xml_comment}\n"
    out += "<character"
    extra = root_attributes.strip()
    if extra:
        out += f" {extra}"
    out += _attr("icon", character.health_icon)
    out += _attr("color", color)
    out += _attr("sprite", character.image.replace(SPRITE_PREFIX, "", 1))
    out += _attr("flipX", character.flip_x)
    out += _attr("holdTime", character.sing_duration)

    x, y = character.position
    if x != 0:
        out += _attr("x", x)
    if y != 0:
        out += _attr("y", y)
    observer.on_field("position", character.position)

    cam_x, cam_y = character.camera_offset
    if cam_x != 0:
        out += _attr("camX", cam_x)
    if cam_y != 0:
        out += _attr("camY", cam_y)
    observer.on_field("camera_position", character.camera_offset)

    if character.scale != 1:
        out += _attr("scale", character.scale)
    if character.disable_antialiasing is not False:
        out += _attr("antialiasing", not character.disable_antialiasing)
    observer.on_field("scale", character.scale)
    observer.on_field("no_antialiasing", character.disable_antialiasing)

    out += ">"

    logger.debug(f"Processing {len(character.animations)} animations...")
    for idx, anim in enumerate(character.animations):
        observer.on_animation(idx, anim.internal_name)
        out += _anim_tag(anim)

    out += "</character>\n"

    observer.on_complete(DIRECTION)
    return format_xml(out, INDENT_UNIT)
