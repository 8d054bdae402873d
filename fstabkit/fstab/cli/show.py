# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from pathlib import Path
from typing import Literal

import click

from fstabkit.fstab.click import fstab_argument, fstab_errors_as_click, strict_option
from fstabkit.fstab.codec import get_codec
from fstabkit.fstab.jsonutil import json_dumps_table_set
from fstabkit.fstab.table import FstabTable
from typeguard import typechecked


@click.command()
@fstab_argument
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "fstab"]),
    default="json",
    show_default=True,
    help="json: one compact JSON document. fstab: the entries re-encoded in canonical form.",
)
@strict_option
@typechecked
def main(path: Path, output_format: Literal["json", "fstab"], strict: bool) -> None:
    """Parse the fstab at PATH and print its entries.

    Comments are not shown. Lines that do not fit the detected dialect are skipped
    unless --strict is given.
    """
    with fstab_errors_as_click():
        table_set = FstabTable.open(path).parse(strict=strict)

    if output_format == "json":
        click.echo(json_dumps_table_set(table_set))
    else:
        click.echo(get_codec(table_set.dialect).encode(table_set.entries), nl=False)
