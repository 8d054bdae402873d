# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from pathlib import Path
from typing import Protocol

from fstabkit.fstab.errors import IoFailure

ENCODING = "utf-8"


class FileClient(Protocol):
    """Whole-file access to the storage behind a mount table.

    Every method opens and closes the file itself; nothing is kept open between
    calls. Failures are raised as `IoFailure`.
    """

    def check_readable(self, path: Path) -> None:
        """Raise `IoFailure` unless `path` can be opened for reading."""

    def read_text(self, path: Path) -> str:
        """Return the full contents of `path`."""

    def write_text(self, path: Path, text: str) -> int:
        """Replace the contents of `path` with `text`. Return the number of bytes written."""


class LocalFileClient(FileClient):
    def check_readable(self, path: Path) -> None:
        try:
            with open(path, "rb"):
                pass
        except OSError as e:
            raise IoFailure(path, e) from e

    def read_text(self, path: Path) -> str:
        try:
            with open(path, "rb") as f:
                return f.read().decode(ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            raise IoFailure(path, e) from e

    def write_text(self, path: Path, text: str) -> int:
        data = text.encode(ENCODING)
        try:
            with open(path, "wb") as f:
                written = f.write(data)
                f.flush()
        except OSError as e:
            raise IoFailure(path, e) from e
        return written
