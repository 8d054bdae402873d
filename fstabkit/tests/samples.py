# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from importlib import resources
from pathlib import Path
from typing import Callable

from fstabkit.tests import data

# writes a sample into a scratch directory and returns its path
SampleWriter = Callable[[str], Path]


def read_sample(name: str) -> str:
    return resources.files(data).joinpath(name).read_text()
