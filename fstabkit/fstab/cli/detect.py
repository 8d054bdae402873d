# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from pathlib import Path

import click

from fstabkit.fstab.click import fstab_argument, fstab_errors_as_click
from fstabkit.fstab.table import FstabTable
from typeguard import typechecked


@click.command()
@fstab_argument
@typechecked
def main(path: Path) -> None:
    """Print the dialect of the fstab at PATH."""
    with fstab_errors_as_click():
        dialect = FstabTable.open(path).detect()
    click.echo(dialect.value)
