from __future__ import annotations

from enum import Enum


class DocumentKind(Enum):
    """Determines which parser / validator / serializer family to use."""
    CONFIG = "config"
    BUILD_RECORD = "build-record"
    BUILD_DIFF = "build-diff"
    REPORT = "report"
