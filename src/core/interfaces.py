"""
Contracts that every document kind's codec implements.

- IDocumentWriter: domain object → bytes written to a binary sink
- IDocumentReader: binary source → domain object
- IDocumentValidator: domain object → ValidationResult
"""
from __future__ import annotations

from typing import BinaryIO, Protocol, TypeVar

from core.validation_result import ValidationResult

T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)


class IDocumentWriter(Protocol[T_contra]):
    """Writes a complete document to *sink*.  Must be deterministic."""

    def __call__(self, document: T_contra, sink: BinaryIO) -> None: ...


class IDocumentReader(Protocol[T_co]):
    """
    Reads a complete document from *source*.

    Raises ValueError (or ``ElementTree.ParseError``) on content that
    does not match the kind's format; lets ``OSError`` escape.
    """

    def __call__(self, source: BinaryIO) -> T_co: ...


class IDocumentValidator(Protocol[T_contra]):
    def __call__(self, document: T_contra) -> ValidationResult: ...
