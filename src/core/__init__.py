from core.document_kind import DocumentKind
from core.validation_result import ValidationResult
from core.errors import CacheDocumentError, UnsupportedKindError, MalformedDocumentError

__all__ = [
    "DocumentKind",
    "ValidationResult",
    "CacheDocumentError",
    "UnsupportedKindError",
    "MalformedDocumentError",
]
