from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional

from core.document_kind import DocumentKind


@dataclass(frozen=True, slots=True)
class ProjectReport:
    """Cache outcome for one module of the build."""
    group_id: str
    artifact_id: str
    checksum: str
    checksum_matched: bool = False
    lifecycle_matched: bool = False
    source: Optional[str] = None
    shared_to_remote: bool = False
    url: Optional[str] = None

    @property
    def coordinate(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"


@dataclass(frozen=True, slots=True)
class CacheReport:
    """Aggregate cache outcome for a whole build."""
    kind: ClassVar[DocumentKind] = DocumentKind.REPORT

    projects: tuple[ProjectReport, ...] = field(default_factory=tuple)
