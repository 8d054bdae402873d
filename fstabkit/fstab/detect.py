# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
from typing import Optional, Sequence

from fstabkit.fstab.errors import UnsupportedFormat
from fstabkit.fstab.parsing import DEVICE_PREFIX, iter_content_lines, split_fields
from fstabkit.schemas.fstab.table_set import Dialect
from typeguard import typechecked

logger = logging.getLogger(__name__)


def classify_fields(fields: Sequence[str]) -> Optional[Dialect]:
    """Guess the dialect of a single split line, or None if its shape is unknown.

    Rules are tried in order, so a five field line whose first field is not a
    `/dev/` path is read as the legacy Android layout.

    Examples:
    >>> classify_fields("/dev/sda1 / ext4 defaults 0 1".split())
    <Dialect.STANDARD: 'standard'>
    >>> classify_fields("/cache yaffs2 mtd@cache".split())
    <Dialect.ANDROID_LEGACY: 'android_legacy'>
    >>> classify_fields("/dev/block/by-name/system /system ext4 ro wait".split())
    <Dialect.ANDROID_MODERN: 'android_modern'>
    """
    n = len(fields)
    if n == 6:
        return Dialect.STANDARD
    elif 3 <= n <= 5 and not fields[0].startswith(DEVICE_PREFIX):
        return Dialect.ANDROID_LEGACY
    elif n == 5:
        return Dialect.ANDROID_MODERN
    return None


@typechecked
def detect_dialect(text: str) -> Dialect:
    """Pick the dialect of a whole file from its first classifiable line.

    Later lines are not checked; lines that do not fit the chosen dialect are
    dealt with by the decoder.

    Raises `UnsupportedFormat` if no line has a recognized shape.
    """
    for lineno, line in iter_content_lines(text):
        dialect = classify_fields(split_fields(line))
        if dialect is not None:
            logger.debug(f"Detected {dialect.value} fstab from line {lineno}")
            return dialect
    raise UnsupportedFormat("Unsupported file passed: no line looks like an fstab entry")
