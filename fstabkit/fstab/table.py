# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from fstabkit.fstab.codec import get_codec
from fstabkit.fstab.detect import detect_dialect
from fstabkit.fstab.errors import EntryError
from fstabkit.fstab.files import FileClient, LocalFileClient
from fstabkit.schemas.fstab.table_set import Dialect, TableSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FstabTable:
    """A handle on one fstab file.

    Only the location is stored. Every call reads or rewrites the whole file, so
    two handles on the same path do not coordinate with each other.
    """

    location: Path
    client: FileClient = field(default_factory=LocalFileClient, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "location", Path(self.location))

    @classmethod
    def open(
        cls, location: Union[str, Path], client: Optional[FileClient] = None
    ) -> FstabTable:
        """Raises `IoFailure` if `location` cannot be opened for reading."""
        client = client if client is not None else LocalFileClient()
        path = Path(location)
        client.check_readable(path)
        return cls(location=path, client=client)

    def read_text(self) -> str:
        return self.client.read_text(self.location)

    def detect(self) -> Dialect:
        return detect_dialect(self.read_text())

    def parse(self, strict: bool = False) -> TableSet:
        """Read the file and decode it in the detected dialect.

        Lines that do not decode are dropped unless `strict` is set, in which case
        the first one is raised.
        """
        text = self.read_text()
        dialect = detect_dialect(text)
        table_set = get_codec(dialect).decode(text, strict=strict)
        logger.debug(
            f"Parsed {len(table_set.entries)} {dialect.value} entries from {self.location}"
        )
        return table_set

    def validate(self) -> Tuple[Dialect, List[EntryError]]:
        """Return the detected dialect and every line that does not decode in it."""
        text = self.read_text()
        dialect = detect_dialect(text)
        return dialect, get_codec(dialect).validate(text)

    def save(self, table_set: TableSet) -> int:
        """Replace the file with the encoding of `table_set`. Returns bytes written."""
        text = get_codec(table_set.dialect).encode(table_set.entries)
        written = self.client.write_text(self.location, text)
        logger.debug(f"Wrote {written} bytes to {self.location}")
        return written
