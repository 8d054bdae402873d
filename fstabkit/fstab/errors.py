# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Errors raised while reading, decoding or writing a mount table."""

from pathlib import Path
from typing import Optional, Union


class FstabError(Exception):
    """Base class for all fstabkit errors."""


class IoFailure(FstabError):
    """The backing file could not be opened, read or written."""

    def __init__(self, path: Union[str, Path], cause: Exception) -> None:
        self.path = Path(path)
        self.cause = cause
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"{self.path}: {reason}")


class UnsupportedFormat(FstabError, ValueError):
    """No line of the text matches any known fstab layout."""


class EntryError(FstabError, ValueError):
    """A single line could not be decoded in the requested dialect.

    `lineno` is only known when the line was decoded as part of a whole file.
    """

    def __init__(self, message: str, line: str, lineno: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.lineno = lineno

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        return f"line {self.lineno}: {self.message}"


class MalformedEntry(EntryError):
    """The line has the wrong number of fields for the dialect."""


class FlagsMissing(EntryError):
    """A `flags=` field is required or present, but carries no flags."""


class InvalidInteger(EntryError):
    """A numeric field is not an unsigned 16-bit integer."""
