from doc_types.config.model import CacheConfig, RemoteConfig, LocalConfig, InputConfig
from doc_types.config import parser
from doc_types.config import serializer
from doc_types.config import validator

__all__ = [
    "CacheConfig",
    "RemoteConfig",
    "LocalConfig",
    "InputConfig",
    "parser",
    "serializer",
    "validator",
]
