#!/usr/bin/env python3
"""
Command line entry point for converting character files.

Usage:
    psych2cne characters/bf.json --root-attributes 'isPlayer="true"'
    psych2cne data/characters/bf.xml --output-dir out/
    psych2cne bf.json --stdout
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from psych2cne.config import get_default_root_attributes, get_log_level_name, get_watermark
from psych2cne.converters.observer import LoggingObserver
from psych2cne.exceptions import Psych2CNEError
from psych2cne.files import Direction, check_extension, convert_file, convert_text
from psych2cne.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="psych2cne",
        description="Convert character files between Psych Engine JSON and Codename Engine XML"
    )
    parser.add_argument(
        "input",
        help="Character file to convert (.json or .xml)"
    )
    parser.add_argument(
        "--direction",
        choices=[d.value for d in Direction],
        help="Conversion type (default: from the input extension)"
    )
    parser.add_argument(
        "--root-attributes",
        default=None,
        help="Attributes added to <character> for psych2cne, e.g. 'isPlayer=\"true\"' "
             "(default: $PSYCH2CNE_ROOT_ATTRIBUTES)"
    )
    parser.add_argument(
        "--output-dir",
        help="Directory for the converted file (default: next to the input)"
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the converted document instead of writing a file"
    )
    parser.add_argument(
        "--log-file",
        help="Also append log output to this file"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every converted field and animation"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        logger = setup_logging(
            level=logging.DEBUG if args.verbose else get_log_level_name(),
            log_file=Path(args.log_file) if args.log_file else None,
            console_output=not args.stdout,
        )
    except Psych2CNEError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    input_path = Path(args.input)
    direction = Direction.parse(args.direction) if args.direction else Direction.from_path(input_path)
    root_attributes = (
        args.root_attributes if args.root_attributes is not None else get_default_root_attributes()
    )
    observer = LoggingObserver(logger)
    watermark = get_watermark()

    try:
        if args.stdout:
            check_extension(input_path, direction)
            if not input_path.exists():
                raise FileNotFoundError(f"Character file not found: {input_path}")
            converted = convert_text(
                input_path.read_text(encoding="utf-8-sig"),
                direction,
                root_attributes,
                watermark=watermark,
                observer=observer,
            )
            print(converted.rstrip("\n"))
        else:
            output_path = convert_file(
                input_path,
                direction,
                output_dir=Path(args.output_dir) if args.output_dir else None,
                root_attributes=root_attributes,
                watermark=watermark,
                observer=observer,
            )
            logger.info(f"Saved to: {output_path}")
    except (Psych2CNEError, OSError, UnicodeDecodeError) as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
