# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Logging setup for the command line entrypoints."""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Tuple


def init_logger(
    logger_name: str,
    log_level: int = logging.INFO,
    log_file: Optional[Path] = None,
    log_formatter: Optional[logging.Formatter] = logging.Formatter(
        "[%(asctime)s] - [%(levelname)s] - [%(name)s] - %(message)s"
    ),
    max_bytes: int = 1024 * 1024,
    backup_count: int = 2,
) -> Tuple[logging.Logger, logging.Handler]:
    """Set up logging for the fstabkit CLI.

    Logs go to `log_file` (rotated) if given, otherwise to stderr. Handlers from a
    previous call are replaced so repeated invocations in one process do not
    duplicate records.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handler: logging.Handler
    if log_file is not None:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        handler = RotatingFileHandler(
            log_file, mode="a", maxBytes=max_bytes, backupCount=backup_count
        )
    else:
        handler = logging.StreamHandler(sys.stderr)

    if log_formatter:
        handler.setFormatter(log_formatter)
    logger.addHandler(handler)

    return logger, handler
