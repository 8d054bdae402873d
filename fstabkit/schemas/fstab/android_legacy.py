# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class AndroidLegacyEntry:
    """One line of a recovery-style Android fstab.

    Column order is shifted compared to the other layouts: the mount point comes
    first and the device comes third, e.g. `/cache yaffs2 mtd@cache flags=backup`.
    """

    mount_point: str
    filesystem_type: str
    device_spec: str
    secondary_device_spec: Optional[str] = None
    manager_flags: Optional[Tuple[str, ...]] = None
