from services.cache_document_service import CacheDocumentService

__all__ = ["CacheDocumentService"]
