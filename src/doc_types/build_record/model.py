from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional

from core.document_kind import DocumentKind


@dataclass(frozen=True, slots=True)
class Artifact:
    """A file produced by the build and stored in the cache."""
    group_id: str
    artifact_id: str
    version: Optional[str] = None
    type: str = "jar"
    classifier: Optional[str] = None
    scope: Optional[str] = None
    file_name: Optional[str] = None
    file_hash: Optional[str] = None
    file_size: int = 0


@dataclass(frozen=True, slots=True)
class DigestItem:
    """One hashed input (source file, dependency, plugin parameter...)."""
    type: str
    hash: str
    file_checksum: Optional[str] = None
    value: Optional[str] = None


@dataclass(frozen=True, slots=True)
class BuildRecord:
    """Per-module record of a cached build and the inputs it was built from."""
    kind: ClassVar[DocumentKind] = DocumentKind.BUILD_RECORD

    project: str
    checksum: str
    cache_implementation_version: Optional[str] = None
    hash_algorithm: str = "XX"
    final: bool = False
    goals: tuple[str, ...] = field(default_factory=tuple)
    artifact: Optional[Artifact] = None
    attached_artifacts: tuple[Artifact, ...] = field(default_factory=tuple)
    inputs: tuple[DigestItem, ...] = field(default_factory=tuple)
