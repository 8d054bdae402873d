# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, Iterable, List, TypeVar

from fstabkit.fstab.errors import EntryError
from fstabkit.fstab.parsing import iter_content_lines
from fstabkit.schemas.fstab.table_set import Dialect, table_set_for, TableSet

logger = logging.getLogger(__name__)

TEntry = TypeVar("TEntry")


class FstabCodec(ABC, Generic[TEntry]):
    """Line decoder and text encoder for one fstab dialect.

    Subclasses only implement the single line conversions; whole-text decoding
    and encoding are shared.
    """

    dialect: ClassVar[Dialect]

    @abstractmethod
    def decode_line(self, line: str) -> TEntry:
        """Decode one non-comment line. Raises a subclass of `EntryError` if the
        line does not fit the dialect.
        """

    @abstractmethod
    def encode_entry(self, entry: TEntry) -> str:
        """Render one entry as a newline-terminated line."""

    def decode(self, text: str, strict: bool = False) -> TableSet:
        """Decode every comment-free, non-blank line of `text`.

        By default a line that fails to decode is dropped and decoding carries on.
        With `strict=True` the first failure is raised with its line number.
        """
        entries: List[TEntry] = []
        for lineno, line in iter_content_lines(text):
            try:
                entries.append(self.decode_line(line))
            except EntryError as e:
                e.lineno = lineno
                if strict:
                    raise
                logger.debug(f"Dropping {self.dialect.value} {e}: {line!r}")
        logger.debug(f"Decoded {len(entries)} {self.dialect.value} entries")
        return table_set_for(self.dialect, entries)  # type: ignore[arg-type]

    def validate(self, text: str) -> List[EntryError]:
        """Return the errors of every line that does not decode, in file order."""
        errors: List[EntryError] = []
        for lineno, line in iter_content_lines(text):
            try:
                self.decode_line(line)
            except EntryError as e:
                e.lineno = lineno
                errors.append(e)
        return errors

    def encode(self, entries: Iterable[TEntry]) -> str:
        return "".join(self.encode_entry(entry) for entry in entries)
