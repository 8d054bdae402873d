# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

import pytest

from fstabkit.fstab.errors import InvalidInteger, IoFailure, MalformedEntry, UnsupportedFormat
from fstabkit.fstab.files import LocalFileClient
from fstabkit.fstab.table import FstabTable
from fstabkit.schemas.fstab.android_legacy import AndroidLegacyEntry
from fstabkit.schemas.fstab.standard import StandardEntry
from fstabkit.schemas.fstab.table_set import (
    AndroidLegacyTable,
    AndroidModernTable,
    Dialect,
    StandardTable,
)
from fstabkit.tests.samples import SampleWriter
from typeguard import typechecked


@dataclass
class FakeFileClient:
    files: Dict[Path, str] = field(default_factory=dict)

    def check_readable(self, path: Path) -> None:
        if path not in self.files:
            raise IoFailure(path, FileNotFoundError(2, "No such file or directory"))

    def read_text(self, path: Path) -> str:
        self.check_readable(path)
        return self.files[path]

    def write_text(self, path: Path, text: str) -> int:
        self.files[path] = text
        return len(text.encode())


def test_open_missing_file(tmp_path: Path) -> None:
    with pytest.raises(IoFailure) as exc_info:
        FstabTable.open(tmp_path / "missing")
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)
    assert exc_info.value.path == tmp_path / "missing"


def test_open_directory(tmp_path: Path) -> None:
    with pytest.raises(IoFailure):
        FstabTable.open(tmp_path)


@pytest.mark.skipif(os.geteuid() == 0, reason="root can read any file")
def test_open_unreadable(tmp_path: Path) -> None:
    path = tmp_path / "fstab"
    path.write_text("/dev/sda1 / ext4 defaults 0 1\n")
    path.chmod(0)
    with pytest.raises(IoFailure):
        FstabTable.open(path)


def test_open_keeps_only_path(sample_path: SampleWriter) -> None:
    path = sample_path("linux.fstab")
    table = FstabTable.open(str(path))
    assert table.location == path
    assert table == FstabTable(path)


@pytest.mark.parametrize(
    "sample, expected_type, num_entries",
    [
        ("linux.fstab", StandardTable, 4),
        ("android_modern.fstab", AndroidModernTable, 3),
        ("android_legacy.fstab", AndroidLegacyTable, 4),
        ("mixed.fstab", StandardTable, 2),
    ],
)
@typechecked
def test_parse_samples(
    sample_path: SampleWriter, sample: str, expected_type: type, num_entries: int
) -> None:
    table_set = FstabTable.open(sample_path(sample)).parse()
    assert type(table_set) is expected_type
    assert len(table_set.entries) == num_entries


def test_parse_reads_fresh_each_call(tmp_path: Path) -> None:
    path = tmp_path / "fstab"
    path.write_text("/dev/sda1 / ext4 defaults 0 1\n")
    table = FstabTable.open(path)
    assert len(table.parse().entries) == 1

    path.write_text("/cache yaffs2 mtd@cache\n/boot mtd boot\n")

    assert table.parse() == AndroidLegacyTable(
        (
            AndroidLegacyEntry(
                mount_point="/cache", filesystem_type="yaffs2", device_spec="mtd@cache"
            ),
            AndroidLegacyEntry(
                mount_point="/boot", filesystem_type="mtd", device_spec="boot"
            ),
        )
    )


def test_parse_comment_only_file(tmp_path: Path) -> None:
    path = tmp_path / "fstab"
    path.write_text("# nothing here\n\n#/dev/sda1 / ext4 defaults 0 1\n")
    with pytest.raises(UnsupportedFormat):
        FstabTable.open(path).parse()


def test_parse_drops_bad_check_order(tmp_path: Path) -> None:
    path = tmp_path / "fstab"
    path.write_text("/dev/sda1 / ext4 defaults 0 1\n/dev/sda2 /home ext4 defaults 0 abc\n")

    table_set = FstabTable.open(path).parse()

    assert [e.device_spec for e in table_set.entries] == ["/dev/sda1"]


def test_parse_strict(sample_path: SampleWriter) -> None:
    with pytest.raises(InvalidInteger):
        FstabTable.open(sample_path("mixed.fstab")).parse(strict=True)


def test_parse_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "fstab"
    path.write_bytes(b"/dev/sda1 / ext4 defaults 0 1\n\xff\xfe\n")
    with pytest.raises(IoFailure):
        FstabTable.open(path).parse()


def test_detect_and_validate(sample_path: SampleWriter) -> None:
    table = FstabTable.open(sample_path("mixed.fstab"))

    dialect, errors = table.validate()

    assert table.detect() == Dialect.STANDARD
    assert dialect == Dialect.STANDARD
    assert [e.lineno for e in errors] == [2, 3, 4]
    assert isinstance(errors[1], MalformedEntry)


def test_save_overwrites(tmp_path: Path) -> None:
    path = tmp_path / "fstab"
    path.write_text("# a long comment that must not survive the rewrite\n" * 10)
    table = FstabTable.open(path)
    entry = StandardEntry(
        device_spec="/dev/sda1",
        mount_point="/",
        filesystem_type="ext4",
        mount_options=("defaults",),
        dump_flag=False,
        check_order=1,
    )

    written = table.save(StandardTable((entry,)))

    expected = "/dev/sda1 / ext4 defaults 0 1\n"
    assert path.read_bytes() == expected.encode()
    assert written == len(expected)


def test_save_empty_table(sample_path: SampleWriter) -> None:
    path = sample_path("android_modern.fstab")

    written = FstabTable.open(path).save(AndroidModernTable())

    assert written == 0
    assert path.read_text() == ""


def test_save_counts_bytes_not_characters(tmp_path: Path) -> None:
    path = tmp_path / "fstab"
    path.touch()
    entry = AndroidLegacyEntry(
        mount_point="/média", filesystem_type="vfat", device_spec="sd"
    )

    written = FstabTable.open(path).save(AndroidLegacyTable((entry,)))

    assert written == len("/média vfat sd  \n".encode("utf-8"))
    assert written == path.stat().st_size


@pytest.mark.parametrize(
    "sample", ["linux.fstab", "android_modern.fstab", "android_legacy.fstab"]
)
def test_save_then_parse(sample_path: SampleWriter, sample: str) -> None:
    table = FstabTable.open(sample_path(sample))
    table_set = table.parse()

    table.save(table_set)

    assert table.parse() == table_set


def test_save_write_failure(tmp_path: Path) -> None:
    path = tmp_path / "fstab"
    path.write_text("/dev/sda1 / ext4 defaults 0 1\n")
    table = FstabTable.open(path)
    path.unlink()
    path.mkdir()

    with pytest.raises(IoFailure):
        table.save(StandardTable())


def test_fake_client() -> None:
    location = Path("/etc/fstab")
    client = FakeFileClient({location: "/dev/sda1 / ext4 defaults 0 1\n"})
    table = FstabTable.open(location, client=client)

    table.save(table.parse())

    assert client.files[location] == "/dev/sda1 / ext4 defaults 0 1\n"
    with pytest.raises(IoFailure):
        FstabTable.open("/etc/other", client=client)


def test_default_client() -> None:
    assert isinstance(FstabTable(Path("/etc/fstab")).client, LocalFileClient)


def test_location_coerced_to_path() -> None:
    table = FstabTable("/etc/fstab")  # type: ignore[arg-type]
    assert table.location == Path("/etc/fstab")
    assert isinstance(table.location, Path)
    assert table == FstabTable(Path("/etc/fstab"))
