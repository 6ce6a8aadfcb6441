"""
Error hierarchy for the cache document codecs.

All codec errors inherit from ``CacheDocumentError`` so callers can
catch a single base type.  I/O failures are not wrapped: they surface
as the builtin ``OSError`` family.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.document_kind import DocumentKind


class CacheDocumentError(Exception):
    """Base class for all cache document errors."""


class UnsupportedKindError(CacheDocumentError):
    """Raised when no codec is registered for the requested kind."""


class MalformedDocumentError(CacheDocumentError):
    """Raised when document content does not match its kind's format."""

    def __init__(self, operation: str, kind: "DocumentKind", reason: str):
        self.operation = operation
        self.kind = kind
        self.reason = reason
        super().__init__(f"Unable to {operation} {kind.value} document: {reason}")
