"""
CacheDocumentService — the facade the build-cache layer talks to.

Holds one CodecRegistry (injected, or the process-wide default) and
exposes:
- to_bytes: any cache document → bytes
- from_bytes / from_stream / from_file: bytes → document of a given kind
- read_config / read_build_record / read_build_diff / read_report:
  kind-specific readers for callers that know what they hold

The service keeps no per-call state, so one instance can be shared
across threads.  Errors from ``document_io`` are never caught here.
"""
from __future__ import annotations

import logging
import os
from typing import Any, BinaryIO, Optional, Union

from core import DocumentKind
from doc_types import BuildDiff, BuildRecord, CacheConfig, CacheDocument, CacheReport
from infrastructure import document_io
from infrastructure.document_io import DocumentSource
from infrastructure.registrations import default_registry
from infrastructure.registry import CodecRegistry

logger = logging.getLogger(__name__)


class CacheDocumentService:
    """
    Converts build-cache documents to bytes and back.  One instance per
    caching subsystem.
    """

    def __init__(self, registry: Optional[CodecRegistry] = None):
        self._registry: CodecRegistry = registry if registry is not None else default_registry()

    @property
    def registry(self) -> CodecRegistry:
        return self._registry

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def to_bytes(self, document: CacheDocument) -> bytes:
        return document_io.serialize(document, self._registry)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def from_bytes(self, kind: DocumentKind, data: bytes) -> Any:
        return document_io.from_bytes(kind, data, self._registry)

    def from_stream(self, kind: DocumentKind, stream: BinaryIO) -> Any:
        return document_io.from_stream(kind, stream, self._registry)

    def from_file(self, kind: DocumentKind, file_path: Union[str, os.PathLike]) -> Any:
        """Read a document from disk (plain or ``.gz``)."""
        logger.info("Reading %s document from %s", kind.value, file_path)
        return document_io.from_file(kind, file_path, self._registry)

    # ------------------------------------------------------------------
    # Kind-specific readers
    # ------------------------------------------------------------------

    def read_config(self, source: DocumentSource) -> CacheConfig:
        return document_io.deserialize(DocumentKind.CONFIG, source, self._registry)

    def read_build_record(self, source: DocumentSource) -> BuildRecord:
        return document_io.deserialize(DocumentKind.BUILD_RECORD, source, self._registry)

    def read_build_diff(self, source: DocumentSource) -> BuildDiff:
        return document_io.deserialize(DocumentKind.BUILD_DIFF, source, self._registry)

    def read_report(self, source: DocumentSource) -> CacheReport:
        return document_io.deserialize(DocumentKind.REPORT, source, self._registry)
