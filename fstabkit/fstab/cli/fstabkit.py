# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""A single entrypoint into the fstabkit commands.

This file is intentionally lightweight and should not include any complex logic.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from fstabkit._version import __version__
from fstabkit.fstab.cli import check, detect, rewrite, show
from fstabkit.fstab.click import (
    LOG_LEVEL,
    log_file_option,
    log_level_option,
    toml_config_option,
)
from fstabkit.fstab.utils.log import init_logger
from typeguard import typechecked

LOGGER_NAME = "fstabkit"


@click.group(epilog=f"fstabkit version: {__version__}")
@toml_config_option("fstabkit")
@log_level_option
@log_file_option
@click.version_option(__version__)
@typechecked
def main(log_level: LOG_LEVEL, log_file: Optional[Path]) -> None:
    """Inspect and rewrite Linux and Android fstab files."""
    init_logger(
        logger_name=LOGGER_NAME,
        log_level=getattr(logging, log_level),
        log_file=log_file,
    )


main.add_command(detect.main, name="detect")
main.add_command(show.main, name="show")
main.add_command(check.main, name="check")
main.add_command(rewrite.main, name="rewrite")

if __name__ == "__main__":
    main()
