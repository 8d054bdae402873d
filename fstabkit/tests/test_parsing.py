# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import pytest

from fstabkit.fstab.parsing import (
    is_comment,
    iter_content_lines,
    parse_u16,
    split_fields,
    split_list,
)


@pytest.mark.parametrize(
    "value, expected",
    [("0", 0), ("1", 1), ("0002", 2), ("+9", 9), ("65535", 65535)],
)
def test_parse_u16(value: str, expected: int) -> None:
    assert parse_u16(value) == expected


@pytest.mark.parametrize("value", ["", "-1", "65536", "1_000", " 1", "1e3", "٣"])
def test_parse_u16_invalid(value: str) -> None:
    with pytest.raises(ValueError):
        parse_u16(value)


def test_split_fields_collapses_whitespace() -> None:
    assert split_fields(" a\tb   c \n") == ["a", "b", "c"]


def test_split_list_keeps_empty_items() -> None:
    assert split_list("", ",") == ("",)
    assert split_list("a;;b", ";") == ("a", "", "b")


def test_is_comment() -> None:
    assert is_comment("#")
    assert is_comment("\t# comment")
    assert not is_comment("")
    assert not is_comment("a # b")


def test_iter_content_lines() -> None:
    text = "# c\n\nfirst line\n   \n  # c2\nsecond line\n"
    assert list(iter_content_lines(text)) == [(3, "first line"), (6, "second line")]
