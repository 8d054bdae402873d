# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import json
from dataclasses import asdict
from functools import partial
from typing import Any, Dict

from fstabkit.schemas.fstab.table_set import TableSet

json_dumps_compact = partial(json.dumps, separators=(",", ":"), default=str)


def table_set_as_dict(table_set: TableSet) -> Dict[str, Any]:
    """
    Examples:
    >>> from fstabkit.schemas.fstab.table_set import AndroidModernTable
    >>> table_set_as_dict(AndroidModernTable())
    {'dialect': 'android_modern', 'entries': []}
    """
    return {
        "dialect": table_set.dialect.value,
        "entries": [asdict(entry) for entry in table_set.entries],
    }


json_dumps_table_set = lambda table_set: json_dumps_compact(  # noqa: E731
    table_set_as_dict(table_set)
)
