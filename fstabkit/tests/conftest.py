# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from pathlib import Path

import pytest

from fstabkit.tests.samples import read_sample, SampleWriter


@pytest.fixture
def sample_path(tmp_path: Path) -> SampleWriter:
    """Copy a file from tests/data into a scratch directory and return its path."""

    def write(name: str) -> Path:
        path = tmp_path / name
        path.write_text(read_sample(name))
        return path

    return write
