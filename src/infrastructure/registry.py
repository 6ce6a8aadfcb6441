"""
Registry — maps DocumentKind to the codec for that kind.

A registry is built once from a fixed set of codecs and is read-only
afterwards, so one instance can be shared by every thread in the
process.  Adding a new document kind requires:
1. Add an enum value to ``DocumentKind``
2. Write model / parser / serializer / validator modules
3. Add one ``DocumentCodec`` to ``registrations.default_codecs()``
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generic, Iterable, Iterator, TypeVar

from core.document_kind import DocumentKind
from core.errors import UnsupportedKindError
from core.interfaces import IDocumentReader, IDocumentValidator, IDocumentWriter

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class DocumentCodec(Generic[T]):
    """Bundle of functions that know how to handle one document kind.

    Generic over the root model type ``T`` (e.g. ``BuildRecord``).
    The registry erases this parameter so callers after ``codec_for()``
    operate on ``Any``.
    """
    kind: DocumentKind
    model: type[T]
    write: IDocumentWriter[T]
    read: IDocumentReader[T]
    validate: IDocumentValidator[T]


class CodecRegistry:
    """Immutable mapping from DocumentKind to DocumentCodec."""

    def __init__(self, codecs: Iterable[DocumentCodec[Any]]):
        bound: dict[DocumentKind, DocumentCodec[Any]] = {}
        for codec in codecs:
            if codec.kind in bound:
                raise ValueError(f"Codec already registered for {codec.kind!r}")
            bound[codec.kind] = codec
        self._codecs = MappingProxyType(bound)

    @property
    def kinds(self) -> frozenset[DocumentKind]:
        return frozenset(self._codecs)

    @property
    def is_complete(self) -> bool:
        """True when every DocumentKind has a codec."""
        return len(self._codecs) == len(DocumentKind)

    def __contains__(self, kind: object) -> bool:
        return kind in self._codecs

    def __len__(self) -> int:
        return len(self._codecs)

    def __iter__(self) -> Iterator[DocumentCodec[Any]]:
        return iter(self._codecs.values())

    def codec_for(self, kind: DocumentKind) -> DocumentCodec[Any]:
        """Look up the codec for a document kind.  Raises on missing."""
        if not isinstance(kind, DocumentKind):
            raise UnsupportedKindError(f"Not a document kind: {kind!r}")
        try:
            return self._codecs[kind]
        except KeyError:
            raise UnsupportedKindError(
                f"No codec registered for {kind!r}. "
                f"Registered kinds: {', '.join(sorted(k.value for k in self._codecs)) or 'none'}"
            ) from None

    def codec_for_document(self, document: object) -> DocumentCodec[Any]:
        """Look up the codec from a domain object's ``kind`` tag."""
        kind = getattr(type(document), "kind", None)
        if not isinstance(kind, DocumentKind):
            raise UnsupportedKindError(
                f"{type(document).__name__} is not a cache document type"
            )
        codec = self.codec_for(kind)
        if not isinstance(document, codec.model):
            raise UnsupportedKindError(
                f"{type(document).__name__} claims kind {kind!r} "
                f"but the registered model is {codec.model.__name__}"
            )
        return codec
