# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.

from fstabkit.fstab.codec.base import FstabCodec
from fstabkit.fstab.errors import InvalidInteger, MalformedEntry
from fstabkit.fstab.parsing import OPTION_SEPARATOR, parse_u16, split_fields, split_list
from fstabkit.schemas.fstab.standard import StandardEntry
from fstabkit.schemas.fstab.table_set import Dialect

NUM_FIELDS = 6


class StandardCodec(FstabCodec[StandardEntry]):
    """`<device> <mount point> <type> <options> <dump> <pass>`"""

    dialect = Dialect.STANDARD

    def decode_line(self, line: str) -> StandardEntry:
        parts = split_fields(line)
        if len(parts) != NUM_FIELDS:
            raise MalformedEntry(
                f"expected {NUM_FIELDS} fields, but got {len(parts)}", line
            )
        try:
            check_order = parse_u16(parts[5])
        except ValueError as e:
            raise InvalidInteger(f"invalid fsck order: {e}", line) from e
        return StandardEntry(
            device_spec=parts[0],
            mount_point=parts[1],
            filesystem_type=parts[2],
            mount_options=split_list(parts[3], OPTION_SEPARATOR),
            dump_flag=parts[4] != "0",
            check_order=check_order,
        )

    def encode_entry(self, entry: StandardEntry) -> str:
        dump = "1" if entry.dump_flag else "0"
        options = OPTION_SEPARATOR.join(entry.mount_options)
        return f"{entry.device_spec} {entry.mount_point} {entry.filesystem_type} {options} {dump} {entry.check_order}\n"
