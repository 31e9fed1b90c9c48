"""Psych <-> Codename Engine character converters.

Pure conversion logic: strings and records in, strings out.
No file I/O - that is handled by psych2cne.files.
"""

from .cne_to_psych import cne_to_psych, parse_cne_character
from .observer import ConversionObserver, LoggingObserver
from .psych_to_cne import psych_to_cne
from .xml_format import format_xml

__all__ = [
    "psych_to_cne",
    "cne_to_psych",
    "parse_cne_character",
    "format_xml",
    "ConversionObserver",
    "LoggingObserver",
]
