from infrastructure.registry import DocumentCodec, CodecRegistry
from infrastructure.registrations import default_codecs, default_registry
from infrastructure.document_io import (
    DocumentSource,
    serialize,
    deserialize,
    from_bytes,
    from_stream,
    from_file,
)

__all__ = [
    "DocumentCodec",
    "CodecRegistry",
    "default_codecs",
    "default_registry",
    "DocumentSource",
    "serialize",
    "deserialize",
    "from_bytes",
    "from_stream",
    "from_file",
]
