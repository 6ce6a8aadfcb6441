from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional

from core.document_kind import DocumentKind


@dataclass(frozen=True, slots=True)
class RemoteConfig:
    enabled: bool = False
    url: Optional[str] = None
    id: str = "cache"
    save_to_remote: bool = False


@dataclass(frozen=True, slots=True)
class LocalConfig:
    max_builds_cached: int = 3
    location: Optional[str] = None


@dataclass(frozen=True, slots=True)
class InputConfig:
    """Which project files are hashed into the build checksum."""
    glob: str = "*"
    includes: tuple[str, ...] = field(default_factory=tuple)
    excludes: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class CacheConfig:
    """Build cache configuration."""
    kind: ClassVar[DocumentKind] = DocumentKind.CONFIG

    enabled: bool = True
    hash_algorithm: str = "XX"
    validate_xml: bool = False
    remote: RemoteConfig = field(default_factory=RemoteConfig)
    local: LocalConfig = field(default_factory=LocalConfig)
    attached_outputs: tuple[str, ...] = field(default_factory=tuple)
    input: InputConfig = field(default_factory=InputConfig)
