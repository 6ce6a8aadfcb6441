"""
One package per cache document kind.

Each package provides ``model`` (frozen dataclasses), ``parser``,
``serializer`` and ``validator``.  ``CacheDocument`` is the union of the
four root models.
"""
from typing import Union

from doc_types.config import CacheConfig
from doc_types.build_record import BuildRecord
from doc_types.build_diff import BuildDiff
from doc_types.report import CacheReport

CacheDocument = Union[CacheConfig, BuildRecord, BuildDiff, CacheReport]

__all__ = [
    "CacheConfig",
    "BuildRecord",
    "BuildDiff",
    "CacheReport",
    "CacheDocument",
]
