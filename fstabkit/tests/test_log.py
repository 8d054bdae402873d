# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fstabkit.fstab.utils.log import init_logger


def test_init_logger_file(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "dir" / "test.log"
    logger, handler = init_logger("fstabkit_test.file", logging.DEBUG, log_file)

    logger.debug("hello")
    handler.flush()

    assert isinstance(handler, RotatingFileHandler)
    assert "[DEBUG] - [fstabkit_test.file] - hello" in log_file.read_text()


def test_init_logger_replaces_handlers() -> None:
    logger, first = init_logger("fstabkit_test.stream")
    _, second = init_logger("fstabkit_test.stream", logging.ERROR)

    assert logger.handlers == [second]
    assert first is not second
    assert logger.level == logging.ERROR
