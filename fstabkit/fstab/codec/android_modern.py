# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.

from fstabkit.fstab.codec.base import FstabCodec
from fstabkit.fstab.errors import MalformedEntry
from fstabkit.fstab.parsing import OPTION_SEPARATOR, split_fields, split_list
from fstabkit.schemas.fstab.android_modern import AndroidModernEntry
from fstabkit.schemas.fstab.table_set import Dialect

NUM_FIELDS = 5


class AndroidModernCodec(FstabCodec[AndroidModernEntry]):
    """`<src> <mount point> <type> <mount flags> <fs_mgr flags>`"""

    dialect = Dialect.ANDROID_MODERN

    def decode_line(self, line: str) -> AndroidModernEntry:
        parts = split_fields(line)
        if len(parts) != NUM_FIELDS:
            raise MalformedEntry(
                f"expected {NUM_FIELDS} fields, but got {len(parts)}", line
            )
        return AndroidModernEntry(
            device_spec=parts[0],
            mount_point=parts[1],
            filesystem_type=parts[2],
            mount_options=split_list(parts[3], OPTION_SEPARATOR),
            manager_flags=split_list(parts[4], OPTION_SEPARATOR),
        )

    def encode_entry(self, entry: AndroidModernEntry) -> str:
        options = OPTION_SEPARATOR.join(entry.mount_options)
        flags = OPTION_SEPARATOR.join(entry.manager_flags)
        return f"{entry.device_spec} {entry.mount_point} {entry.filesystem_type} {options} {flags}\n"
