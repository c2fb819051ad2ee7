"""
Validation and parsing of WidthxHeight size lists.
"""

import re
from typing import List, Optional

from sizemap_gen.models import DeviceSizes, DeviceType, SizePair, SizeState


# WidthxHeight without spaces, e.g. 150x50
SIZE_PATTERN = re.compile(r"[0-9]+x[0-9]+")

NULL_SENTINEL = "null"


def is_null_input(text: str) -> bool:
    """Check whether the text is the case-insensitive ``null`` sentinel."""
    return text.strip().lower() == NULL_SENTINEL


def is_valid_size(token: str) -> bool:
    """
    Check a single size token.

    Args:
        token: One comma-separated entry, already trimmed.

    Returns:
        True if the token is in WidthxHeight format.
    """
    return SIZE_PATTERN.fullmatch(token) is not None


def is_valid_input(text: str) -> bool:
    """
    Check a whole line of user input.

    Empty input and ``null`` are accepted as-is. Anything else must be a
    comma-separated list of WidthxHeight tokens; whitespace around each token
    is ignored.

    Args:
        text: Raw line without its trailing newline.

    Returns:
        True if the line can be handed to :func:`parse_sizes`.
    """
    if text == "" or is_null_input(text):
        return True
    return all(is_valid_size(token.strip()) for token in text.split(","))


def parse_sizes(text: str) -> Optional[List[SizePair]]:
    """
    Parse accepted input into size pairs.

    Args:
        text: Input already accepted by :func:`is_valid_input`.

    Returns:
        None for ``null``, an empty list for empty input, otherwise the
        (width, height) pairs in input order.
    """
    if is_null_input(text):
        return None
    if not text:
        return []

    sizes = []
    for token in text.split(","):
        width, height = token.strip().split("x")
        sizes.append((int(width, 10), int(height, 10)))
    return sizes


def parse_device_sizes(text: str, device_type: DeviceType) -> DeviceSizes:
    """Parse accepted input into a :class:`DeviceSizes` result."""
    sizes = parse_sizes(text)
    if sizes is None:
        return DeviceSizes(device_type=device_type, state=SizeState.NULL)
    if not sizes:
        return DeviceSizes(device_type=device_type, state=SizeState.ABSENT)
    return DeviceSizes(device_type=device_type, state=SizeState.PRESENT, sizes=sizes)
