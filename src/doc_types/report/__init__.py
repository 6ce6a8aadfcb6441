from doc_types.report.model import CacheReport, ProjectReport
from doc_types.report import parser
from doc_types.report import serializer
from doc_types.report import validator

__all__ = [
    "CacheReport",
    "ProjectReport",
    "parser",
    "serializer",
    "validator",
]
