"""Convert character files on disk.

Reads the input, checks its extension against the requested direction,
runs the matching converter and writes ``converted_<name>.<ext>``.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from psych2cne.config import DEFAULT_WATERMARK, Watermark
from psych2cne.converters.cne_to_psych import cne_to_psych
from psych2cne.converters.observer import NULL_OBSERVER, ConversionObserver
from psych2cne.converters.psych_to_cne import psych_to_cne
from psych2cne.exceptions import ParseError, ValidationError

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Conversion direction, named as in the original web tool."""

    PSYCH_TO_CNE = "psych2cne"
    CNE_TO_PSYCH = "cne2psych"

    @property
    def input_extension(self) -> str:
        return ".json" if self is Direction.PSYCH_TO_CNE else ".xml"

    @property
    def output_extension(self) -> str:
        return ".xml" if self is Direction.PSYCH_TO_CNE else ".json"

    @classmethod
    def parse(cls, value: str) -> 'Direction':
        """Look up a direction by name ("psych2cne" / "cne2psych").

        Raises:
            ValidationError: If the name is unknown
        """
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise ValidationError(f"Unknown conversion type: {value!r}") from e

    @classmethod
    def from_path(cls, path: Path) -> 'Direction':
        """Guess the direction from a file extension (.xml -> cne2psych)."""
        if path.suffix.lower() == ".xml":
            return cls.CNE_TO_PSYCH
        return cls.PSYCH_TO_CNE


def check_extension(path: Path, direction: Direction) -> None:
    """Reject a file whose extension belongs to the other direction.

    Raises:
        ValidationError: For a .xml file with psych2cne or a .json file with cne2psych
    """
    other = Direction.CNE_TO_PSYCH if direction is Direction.PSYCH_TO_CNE else Direction.PSYCH_TO_CNE
    if path.name.lower().endswith(other.input_extension):
        raise ValidationError(
            f"Invalid file extension. Please upload a {direction.input_extension} file."
        )


def output_filename(path: Path, direction: Direction) -> str:
    """Name of the converted file, e.g. ``bf.json`` -> ``converted_bf.xml``."""
    stem = path.name.replace(".json", "").replace(".xml", "")
    return f"converted_{stem}{direction.output_extension}"


def convert_text(
    text: str,
    direction: Direction,
    root_attributes: str = "",
    *,
    watermark: Watermark = DEFAULT_WATERMARK,
    observer: ConversionObserver = NULL_OBSERVER,
) -> str:
    """
    Convert file contents in the given direction.

    Args:
        text: Psych JSON text or CNE XML text
        direction: Which way to convert
        root_attributes: Extra <character> attributes (psych2cne only)
        watermark: Provenance markers for the output
        observer: Optional progress checkpoints

    Returns:
        Converted document text

    Raises:
        ParseError: If the JSON or XML cannot be parsed
        MissingElementError: If the XML has no <character> element
        MalformedRecordError: If the JSON is not a Psych character
    """
    if direction is Direction.CNE_TO_PSYCH:
        return cne_to_psych(text, watermark=watermark, observer=observer)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON format: {e}") from e
    if not isinstance(data, dict):
        raise ParseError("Invalid JSON format: expected an object at the top level.")

    return psych_to_cne(data, root_attributes, watermark=watermark, observer=observer)


def convert_file(
    path: Path,
    direction: Direction,
    output_dir: Optional[Path] = None,
    root_attributes: str = "",
    *,
    watermark: Watermark = DEFAULT_WATERMARK,
    observer: ConversionObserver = NULL_OBSERVER,
) -> Path:
    """
    Convert a character file and write the result.

    Args:
        path: Input .json or .xml file
        direction: Which way to convert
        output_dir: Where to write (default: next to the input)
        root_attributes: Extra <character> attributes (psych2cne only)
        watermark: Provenance markers for the output
        observer: Optional progress checkpoints

    Returns:
        Path of the written file

    Raises:
        FileNotFoundError: If the input file doesn't exist
        ValidationError: If the extension doesn't match the direction
        ConversionError: If the conversion itself fails
    """
    check_extension(path, direction)
    if not path.exists():
        raise FileNotFoundError(f"Character file not found: {path}")

    text = path.read_text(encoding="utf-8-sig")
    converted = convert_text(
        text, direction, root_attributes, watermark=watermark, observer=observer
    )

    target_dir = output_dir or path.parent
    target_dir.mkdir(parents=True, exist_ok=True)
    output_path = target_dir / output_filename(path, direction)
    output_path.write_text(converted, encoding="utf-8")
    logger.info(f"Wrote {output_path}")
    return output_path
