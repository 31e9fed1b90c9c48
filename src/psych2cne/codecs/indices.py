"""Run-length notation for animation frame indices.

Runs of three or more consecutive frames collapse to ``start..end``::

    [0, 1, 2, 5]  <->  "0..2,5"
"""

import re
from typing import Iterable, List, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Shortest run written as a range
MIN_RANGE_LENGTH = 3


def parse_leading_int(text: str) -> Optional[int]:
    """Read the integer at the start of ``text`` ("12px" -> 12), or None."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


def encode_indices(indices: Iterable[int]) -> str:
    """Compress a frame index list into comma-separated range notation.

    Example:
        >>> encode_indices([0, 1, 2, 3, 7, 8, 10])
        '0..3,7,8,10'
    """
    values = list(indices)
    parts: List[str] = []
    i = 0
    while i < len(values):
        start = values[i]
        end = start
        while i + 1 < len(values) and values[i + 1] == values[i] + 1:
            i += 1
            end = values[i]
        if end - start + 1 >= MIN_RANGE_LENGTH:
            parts.append(f"{start}..{end}")
        else:
            parts.extend(str(v) for v in range(start, end + 1))
        i += 1
    return ",".join(parts)


def decode_indices(text: str) -> List[int]:
    """Expand range notation back into a frame index list.

    ``start..end`` is inclusive and ascending only; a descending range
    contributes nothing. Tokens that are not numbers are skipped.
    """
    indices: List[int] = []
    for part in text.split(","):
        token = part.strip()
        if ".." in token:
            start_text, end_text = token.split("..")[:2]
            start = parse_leading_int(start_text)
            end = parse_leading_int(end_text)
            if start is not None and end is not None:
                indices.extend(range(start, end + 1))
        else:
            value = parse_leading_int(token)
            if value is not None:
                indices.append(value)
    return indices
