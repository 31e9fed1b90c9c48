"""Structural re-indentation for flat character XML."""

import re

_TAG_BOUNDARY = re.compile(r">\s*<")
_CLOSING_TAG = re.compile(r"^</\w")
_OPENING_TAG = re.compile(r"^<\w[^>]*>")


def format_xml(xml: str, indent_unit: str = "  ") -> str:
    """Put every tag on its own line, indented by nesting depth.

    Assumes tags are adjacent (no mixed text content) and does not check
    well-formedness. Comments, doctypes and self-closing tags are indented
    at the current depth without changing it. So is a line that opens and
    closes an element (``<b>text</b>``): it is not treated as an opening
    tag, so depth stays balanced if text content does appear.

    Args:
        xml: XML text, on one line or many
        indent_unit: String repeated once per nesting level

    Returns:
        Newline-delimited, indented XML

    Example:
        >>> format_xml("<a><b/></a>")
        '<a>\\n  <b/>\\n</a>'
    """
    lines = _TAG_BOUNDARY.sub(">\n<", xml).split("\n")
    depth = 0
    formatted = []

    for line in lines:
        line = line.strip()
        if _CLOSING_TAG.match(line):
            depth = max(depth - 1, 0)
            formatted.append(indent_unit * depth + line)
        elif _OPENING_TAG.match(line) and not line.endswith("/>") and "</" not in line:
            formatted.append(indent_unit * depth + line)
            depth += 1
        else:
            formatted.append(indent_unit * depth + line)

    return "\n".join(formatted)
