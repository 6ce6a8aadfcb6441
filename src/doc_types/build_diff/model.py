from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional

from core.document_kind import DocumentKind


@dataclass(frozen=True, slots=True)
class Mismatch:
    """One input that differs between the current build and its baseline."""
    item: str
    current: Optional[str] = None
    baseline: Optional[str] = None
    reason: Optional[str] = None
    resolution: Optional[str] = None
    context: Optional[str] = None


@dataclass(frozen=True, slots=True)
class BuildDiff:
    """Differences explaining why a build missed the cache."""
    kind: ClassVar[DocumentKind] = DocumentKind.BUILD_DIFF

    mismatches: tuple[Mismatch, ...] = field(default_factory=tuple)
