from doc_types.build_record.model import BuildRecord, Artifact, DigestItem
from doc_types.build_record import parser
from doc_types.build_record import serializer
from doc_types.build_record import validator

__all__ = [
    "BuildRecord",
    "Artifact",
    "DigestItem",
    "parser",
    "serializer",
    "validator",
]
