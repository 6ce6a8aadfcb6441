"""
Central wiring — bind every document kind to its codec.

To add a new document kind, add one ``DocumentCodec`` below.
``default_registry()`` builds the process-wide registry on first use.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any

from core.document_kind import DocumentKind
from infrastructure.registry import CodecRegistry, DocumentCodec

from doc_types import config, build_record, build_diff, report


def default_codecs() -> list[DocumentCodec[Any]]:
    return [
        # ---- Config ----
        DocumentCodec(
            kind=DocumentKind.CONFIG,
            model=config.CacheConfig,
            write=config.serializer.serialize,
            read=config.parser.parse,
            validate=config.validator.validate,
        ),
        # ---- Build record ----
        DocumentCodec(
            kind=DocumentKind.BUILD_RECORD,
            model=build_record.BuildRecord,
            write=build_record.serializer.serialize,
            read=build_record.parser.parse,
            validate=build_record.validator.validate,
        ),
        # ---- Build diff ----
        DocumentCodec(
            kind=DocumentKind.BUILD_DIFF,
            model=build_diff.BuildDiff,
            write=build_diff.serializer.serialize,
            read=build_diff.parser.parse,
            validate=build_diff.validator.validate,
        ),
        # ---- Report ----
        DocumentCodec(
            kind=DocumentKind.REPORT,
            model=report.CacheReport,
            write=report.serializer.serialize,
            read=report.parser.parse,
            validate=report.validator.validate,
        ),
    ]


@lru_cache(maxsize=None)
def default_registry() -> CodecRegistry:
    """Return the shared registry binding all four document kinds."""
    registry = CodecRegistry(default_codecs())
    if not registry.is_complete:
        missing = sorted(k.value for k in DocumentKind if k not in registry)
        raise RuntimeError(f"Default registry is missing codecs for: {', '.join(missing)}")
    return registry
