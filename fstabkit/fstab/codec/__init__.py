# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from typing import Any, Mapping

from fstabkit.fstab.codec.android_legacy import AndroidLegacyCodec
from fstabkit.fstab.codec.android_modern import AndroidModernCodec
from fstabkit.fstab.codec.base import FstabCodec
from fstabkit.fstab.codec.standard import StandardCodec
from fstabkit.schemas.fstab.table_set import Dialect

registry: Mapping[Dialect, FstabCodec[Any]] = {
    codec.dialect: codec
    for codec in (StandardCodec(), AndroidLegacyCodec(), AndroidModernCodec())
}


def get_codec(dialect: Dialect) -> FstabCodec[Any]:
    return registry[dialect]


__all__ = [
    "AndroidLegacyCodec",
    "AndroidModernCodec",
    "FstabCodec",
    "StandardCodec",
    "get_codec",
    "registry",
]
