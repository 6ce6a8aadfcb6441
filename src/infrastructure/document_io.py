"""
Document I/O — convert cache documents to bytes and back.

This is a functional module.  CacheDocumentService delegates here for
the actual document ↔ bytes conversion.

Serialize flow:
    document → kind tag → codec → write into an in-memory sink → bytes
    text XML cannot represent → MalformedDocumentError

Deserialize flow:
    kind     → codec (UnsupportedKindError before the source is touched)
    source   → binary stream (bytes wrapped, paths opened, streams as-is)
    stream   → codec.read → codec.validate → document
    parse error / invalid structure / failed validation → MalformedDocumentError
    OSError  → propagated unchanged
"""
from __future__ import annotations

import gzip
import io
import logging
import os
import xml.etree.ElementTree as ET
import zlib
from contextlib import contextmanager
from pathlib import Path
from typing import Any, BinaryIO, Iterator, Literal, Optional, Union, overload

from core.document_kind import DocumentKind
from core.errors import MalformedDocumentError
from doc_types import BuildDiff, BuildRecord, CacheConfig, CacheDocument, CacheReport
from infrastructure.registrations import default_registry
from infrastructure.registry import CodecRegistry

logger = logging.getLogger(__name__)

DocumentSource = Union[bytes, bytearray, memoryview, BinaryIO, str, os.PathLike]

# Parser failures that mean "the content is wrong", as opposed to OSError.
# EOFError and zlib.error come from truncated or corrupt gzip input.
_MALFORMED_ERRORS = (ET.ParseError, ValueError, EOFError, zlib.error)


def _resolve(registry: Optional[CodecRegistry]) -> CodecRegistry:
    return registry if registry is not None else default_registry()


# ------------------------------------------------------------------
# Source helpers (raw bytes, open stream, or file path — plain or gzip)
# ------------------------------------------------------------------

def _is_gz(path: Path) -> bool:
    return path.suffix == ".gz"


@contextmanager
def _open_source(source: DocumentSource) -> Iterator[BinaryIO]:
    """
    Normalize *source* into a readable binary stream.

    Streams opened here (file paths, in-memory buffers) are closed on
    exit; a caller-supplied stream is left open for the caller.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        with io.BytesIO(source) as stream:
            yield stream
    elif isinstance(source, (str, os.PathLike)):
        path = Path(source)
        if _is_gz(path):
            with gzip.open(path, "rb") as stream:
                yield stream
        else:
            with open(path, "rb") as stream:
                yield stream
    elif hasattr(source, "read"):
        if getattr(source, "closed", False):
            raise OSError("Cannot read a document from a closed stream")
        yield source
    else:
        raise TypeError(
            f"Unsupported document source {type(source).__name__}; "
            f"expected bytes, a binary stream or a file path"
        )


# ------------------------------------------------------------------
# Serialize
# ------------------------------------------------------------------

def serialize(document: CacheDocument, registry: Optional[CodecRegistry] = None) -> bytes:
    """
    Serialize a cache document to bytes.

    The codec is chosen from the document's own ``kind`` tag.  Output is
    deterministic: the same document always yields the same bytes.

    Raises:
        UnsupportedKindError: no codec for the document's kind.
        MalformedDocumentError: a field holds text XML 1.0 cannot carry.
    """
    codec = _resolve(registry).codec_for_document(document)
    with io.BytesIO() as sink:
        try:
            codec.write(document, sink)
        except ValueError as exc:
            raise MalformedDocumentError("serialize", codec.kind, str(exc)) from exc
        data = sink.getvalue()
    logger.debug("Serialized %s document (%d bytes)", codec.kind.value, len(data))
    return data


# ------------------------------------------------------------------
# Deserialize
# ------------------------------------------------------------------

@overload
def deserialize(
    kind: Literal[DocumentKind.CONFIG],
    source: DocumentSource,
    registry: Optional[CodecRegistry] = ...,
) -> CacheConfig: ...
@overload
def deserialize(
    kind: Literal[DocumentKind.BUILD_RECORD],
    source: DocumentSource,
    registry: Optional[CodecRegistry] = ...,
) -> BuildRecord: ...
@overload
def deserialize(
    kind: Literal[DocumentKind.BUILD_DIFF],
    source: DocumentSource,
    registry: Optional[CodecRegistry] = ...,
) -> BuildDiff: ...
@overload
def deserialize(
    kind: Literal[DocumentKind.REPORT],
    source: DocumentSource,
    registry: Optional[CodecRegistry] = ...,
) -> CacheReport: ...
@overload
def deserialize(
    kind: DocumentKind,
    source: DocumentSource,
    registry: Optional[CodecRegistry] = ...,
) -> CacheDocument: ...

def deserialize(
    kind: DocumentKind,
    source: DocumentSource,
    registry: Optional[CodecRegistry] = None,
) -> Any:
    """
    Read a document of *kind* from raw bytes, a binary stream or a file path.

    The returned object is always an instance of the model registered
    for *kind*; the content is never used to pick the kind.

    Raises:
        UnsupportedKindError: no codec for *kind* (the source is untouched).
        MalformedDocumentError: the content is not a valid *kind* document.
        OSError: the source could not be opened or read.
    """
    codec = _resolve(registry).codec_for(kind)

    with _open_source(source) as stream:
        try:
            document = codec.read(stream)
        except _MALFORMED_ERRORS as exc:
            raise MalformedDocumentError("deserialize", kind, str(exc) or type(exc).__name__) from exc

    result = codec.validate(document)
    if not result.is_valid:
        raise MalformedDocumentError("deserialize", kind, "; ".join(result.errors))
    for warning in result.warnings:
        logger.warning("%s document: %s", kind.value, warning)

    logger.debug("Deserialized %s document", kind.value)
    return document


def from_bytes(
    kind: DocumentKind,
    data: Union[bytes, bytearray, memoryview],
    registry: Optional[CodecRegistry] = None,
) -> Any:
    """Deserialize a document held in memory."""
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Expected bytes, got {type(data).__name__}")
    return deserialize(kind, data, registry)


def from_stream(
    kind: DocumentKind,
    stream: BinaryIO,
    registry: Optional[CodecRegistry] = None,
) -> Any:
    """Deserialize a document from an open binary stream (left open)."""
    if not hasattr(stream, "read"):
        raise TypeError(f"Expected a readable stream, got {type(stream).__name__}")
    return deserialize(kind, stream, registry)


def from_file(
    kind: DocumentKind,
    file_path: Union[str, os.PathLike],
    registry: Optional[CodecRegistry] = None,
) -> Any:
    """Deserialize a document from a file; ``.gz`` files are decompressed."""
    if not isinstance(file_path, (str, os.PathLike)):
        raise TypeError(f"Expected a file path, got {type(file_path).__name__}")
    return deserialize(kind, file_path, registry)
