# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""A parsed mount table: every entry belongs to exactly one dialect.

`TableSet` is a closed union of three variants. Consumers dispatch on the
`dialect` tag (or `match` on the variant) rather than on the entry types.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Iterable, Tuple, Type, Union

from fstabkit.schemas.fstab.android_legacy import AndroidLegacyEntry
from fstabkit.schemas.fstab.android_modern import AndroidModernEntry
from fstabkit.schemas.fstab.standard import StandardEntry


class Dialect(Enum):
    STANDARD = "standard"
    ANDROID_LEGACY = "android_legacy"
    ANDROID_MODERN = "android_modern"


def _freeze_entries(table: object, entry_type: type) -> None:
    entries = tuple(getattr(table, "entries"))
    for entry in entries:
        if not isinstance(entry, entry_type):
            raise TypeError(
                f"{type(table).__name__} only holds {entry_type.__name__}, but got {type(entry).__name__}"
            )
    # frozen dataclass: bypass __setattr__ to store the normalized tuple
    object.__setattr__(table, "entries", entries)


@dataclass(frozen=True)
class StandardTable:
    entries: Tuple[StandardEntry, ...] = ()
    dialect: ClassVar[Dialect] = Dialect.STANDARD

    def __post_init__(self) -> None:
        _freeze_entries(self, StandardEntry)


@dataclass(frozen=True)
class AndroidLegacyTable:
    entries: Tuple[AndroidLegacyEntry, ...] = ()
    dialect: ClassVar[Dialect] = Dialect.ANDROID_LEGACY

    def __post_init__(self) -> None:
        _freeze_entries(self, AndroidLegacyEntry)


@dataclass(frozen=True)
class AndroidModernTable:
    entries: Tuple[AndroidModernEntry, ...] = ()
    dialect: ClassVar[Dialect] = Dialect.ANDROID_MODERN

    def __post_init__(self) -> None:
        _freeze_entries(self, AndroidModernEntry)


TableSet = Union[StandardTable, AndroidLegacyTable, AndroidModernTable]

FstabEntry = Union[StandardEntry, AndroidLegacyEntry, AndroidModernEntry]

_TABLE_TYPES: Dict[
    Dialect, Type[Union[StandardTable, AndroidLegacyTable, AndroidModernTable]]
] = {
    Dialect.STANDARD: StandardTable,
    Dialect.ANDROID_LEGACY: AndroidLegacyTable,
    Dialect.ANDROID_MODERN: AndroidModernTable,
}


def table_set_for(dialect: Dialect, entries: Iterable[FstabEntry]) -> TableSet:
    """Wrap entries in the variant tagged with `dialect`.

    Raises `TypeError` if any entry belongs to a different dialect.
    """
    return _TABLE_TYPES[dialect](tuple(entries))  # type: ignore[arg-type]
