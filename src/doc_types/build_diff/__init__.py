from doc_types.build_diff.model import BuildDiff, Mismatch
from doc_types.build_diff import parser
from doc_types.build_diff import serializer
from doc_types.build_diff import validator

__all__ = [
    "BuildDiff",
    "Mismatch",
    "parser",
    "serializer",
    "validator",
]
