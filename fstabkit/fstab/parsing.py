# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Helpers shared by the fstab detector and the per-dialect codecs."""

import logging
import re
from typing import Iterator, List, Tuple

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"
DEVICE_PREFIX = "/dev/"
FLAGS_PREFIX = "flags="
OPTION_SEPARATOR = ","
LEGACY_FLAG_SEPARATOR = ";"

U16_MAX = 0xFFFF
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def is_comment(line: str) -> bool:
    """Examples:
    >>> is_comment("  # /boot was on /dev/sda1")
    True
    >>> is_comment("/dev/sda1 / ext4 defaults 0 1 # trailing")
    False
    """
    return line.lstrip().startswith(COMMENT_PREFIX)


def split_fields(line: str) -> List[str]:
    return line.split()


def split_list(field: str, separator: str) -> Tuple[str, ...]:
    """Split a list-valued field, keeping order and empty items.

    Examples:
    >>> split_list("noatime,errors=remount-ro", ",")
    ('noatime', 'errors=remount-ro')
    >>> split_list("defaults", ",")
    ('defaults',)
    """
    return tuple(field.split(separator))


def parse_u16(s: str) -> int:
    """Parse an unsigned 16-bit integer. Raises `ValueError` on failure.

    Examples:
    >>> parse_u16("2")
    2
    >>> parse_u16("+7")
    7
    >>> parse_u16("65536")
    Traceback (most recent call last):
    ...
    ValueError: '65536' is too large for an unsigned 16-bit integer
    """
    if _UNSIGNED_RE.fullmatch(s) is None:
        raise ValueError(f"{s!r} is not an unsigned integer")
    x = int(s)
    if x > U16_MAX:
        raise ValueError(f"{s!r} is too large for an unsigned 16-bit integer")
    return x


def iter_content_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (1-based line number, line) for every line that is neither a comment
    nor blank.
    """
    for lineno, line in enumerate(text.splitlines(), start=1):
        if is_comment(line):
            logger.debug(f"Skipping commented line {lineno}: {line}")
            continue
        if not line.strip():
            continue
        yield lineno, line
