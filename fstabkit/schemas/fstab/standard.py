# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class StandardEntry:
    """One line of a Linux fstab. See https://man7.org/linux/man-pages/man5/fstab.5.html"""

    device_spec: str
    mount_point: str
    filesystem_type: str
    mount_options: Tuple[str, ...]
    # whether dump(8) should back up the filesystem
    dump_flag: bool
    # fsck(8) pass number, 0 disables checking
    check_order: int
