# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from typing import Optional, Tuple

from fstabkit.fstab.codec.base import FstabCodec
from fstabkit.fstab.errors import FlagsMissing, MalformedEntry
from fstabkit.fstab.parsing import (
    FLAGS_PREFIX,
    LEGACY_FLAG_SEPARATOR,
    split_fields,
    split_list,
)
from fstabkit.schemas.fstab.android_legacy import AndroidLegacyEntry
from fstabkit.schemas.fstab.table_set import Dialect

MIN_FIELDS = 3
MAX_FIELDS = 5


def parse_flags_field(field: str, line: str) -> Tuple[str, ...]:
    """Parse a `flags=a;b;c` field into its flags.

    Raises `FlagsMissing` if the prefix is absent or nothing follows it.
    """
    if not field.startswith(FLAGS_PREFIX):
        raise FlagsMissing(f"expected a {FLAGS_PREFIX} field, but got {field!r}", line)
    payload = field[len(FLAGS_PREFIX) :]  # noqa: E203
    if not payload:
        raise FlagsMissing(
            f"the attribute {FLAGS_PREFIX} was defined but no flags are present", line
        )
    return split_list(payload, LEGACY_FLAG_SEPARATOR)


class AndroidLegacyCodec(FstabCodec[AndroidLegacyEntry]):
    """`<mount point> <type> <device> [<device2>] [flags=<f1>;<f2>]`"""

    dialect = Dialect.ANDROID_LEGACY

    def decode_line(self, line: str) -> AndroidLegacyEntry:
        parts = split_fields(line)
        if not MIN_FIELDS <= len(parts) <= MAX_FIELDS:
            raise MalformedEntry(
                f"expected {MIN_FIELDS} to {MAX_FIELDS} fields, but got {len(parts)}",
                line,
            )

        secondary_device_spec: Optional[str] = None
        manager_flags: Optional[Tuple[str, ...]] = None
        if len(parts) == 4:
            if parts[3].startswith(FLAGS_PREFIX):
                manager_flags = parse_flags_field(parts[3], line)
            else:
                secondary_device_spec = parts[3]
        elif len(parts) == 5:
            secondary_device_spec = parts[3]
            manager_flags = parse_flags_field(parts[4], line)

        return AndroidLegacyEntry(
            mount_point=parts[0],
            filesystem_type=parts[1],
            device_spec=parts[2],
            secondary_device_spec=secondary_device_spec,
            manager_flags=manager_flags,
        )

    def encode_entry(self, entry: AndroidLegacyEntry) -> str:
        # absent optional columns are written as empty strings, which leaves a
        # double (or trailing) space that older readers expect
        secondary = entry.secondary_device_spec or ""
        flags = ""
        if entry.manager_flags is not None:
            flags = FLAGS_PREFIX + LEGACY_FLAG_SEPARATOR.join(entry.manager_flags)
        return f"{entry.mount_point} {entry.filesystem_type} {entry.device_spec} {secondary} {flags}\n"
