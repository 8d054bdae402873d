# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class AndroidModernEntry:
    """One line of an Android fstab in the five column layout.

    https://source.android.com/docs/core/architecture/kernel/mounting-partitions-early
    """

    device_spec: str
    mount_point: str
    filesystem_type: str
    mount_options: Tuple[str, ...]
    # fs_mgr directives, e.g. wait, check, formattable
    manager_flags: Tuple[str, ...]
