"""Centralized exception hierarchy for the Psych/CNE character converter.

Usage:
    from psych2cne.exceptions import ParseError, MissingElementError

    raise ParseError("Invalid XML format.")
    raise MissingElementError("No <character> tag found.")
"""


class Psych2CNEError(Exception):
    """Base exception for all converter errors."""
    pass


class ConversionError(Psych2CNEError):
    """Raised when a single conversion call fails.

    Fatal to that call only; never retried and never returns partial output.
    """
    pass


class ParseError(ConversionError):
    """Raised when the input is not well-formed XML or JSON."""
    pass


class MissingElementError(ConversionError):
    """Raised when the XML document has no <character> element."""
    pass


class MalformedRecordError(ConversionError):
    """Raised when a character record does not have the required shape.

    Examples:
        - position is not a 2-element numeric pair
        - healthbar_colors is missing
    """
    pass


class ValidationError(Psych2CNEError):
    """Raised when an input file is rejected before conversion.

    Examples:
        - .xml file given for a JSON -> XML conversion
        - Unknown conversion direction
    """
    pass


class ConfigurationError(Psych2CNEError):
    """Raised when configuration is invalid.

    Examples:
        - Unknown log level name in PSYCH2CNE_LOG_LEVEL
    """
    pass
