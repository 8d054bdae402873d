# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
from pathlib import Path

import click

from fstabkit.fstab.click import dry_run_option, fstab_argument, fstab_errors_as_click
from fstabkit.fstab.codec import get_codec
from fstabkit.fstab.table import FstabTable
from typeguard import typechecked

logger = logging.getLogger(__name__)


@click.command()
@fstab_argument
@dry_run_option
@typechecked
def main(path: Path, dry_run: bool) -> None:
    """Rewrite the fstab at PATH in canonical form.

    Comments, blank lines and lines that do not fit the detected dialect are
    dropped.
    """
    with fstab_errors_as_click():
        table = FstabTable.open(path)
        table_set = table.parse()
        if dry_run:
            click.echo(get_codec(table_set.dialect).encode(table_set.entries), nl=False)
            return
        written = table.save(table_set)

    logger.info(f"Rewrote {path} with {len(table_set.entries)} entries")
    click.echo(f"Wrote {written} bytes to {path}")
