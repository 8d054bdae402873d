# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import sys
from pathlib import Path

import click

from fstabkit.fstab.click import fstab_argument, fstab_errors_as_click
from fstabkit.fstab.table import FstabTable
from typeguard import typechecked


@click.command()
@fstab_argument
@typechecked
def main(path: Path) -> None:
    """Strictly validate the fstab at PATH.

    Prints every line that does not fit the detected dialect and exits with
    status 1 if there is any.
    """
    with fstab_errors_as_click():
        table = FstabTable.open(path)
        dialect, errors = table.validate()

    for error in errors:
        click.echo(f"{path}:{error.lineno}: {error.message}")
    if errors:
        sys.exit(1)
    click.echo(f"{path}: OK ({dialect.value})")
