"""
Parser for cache configuration documents.

Root element: <cache xmlns="http://maven.apache.org/BUILD-CACHE-CONFIG/1.0.0">

Every section is optional; missing sections and elements take the
model defaults.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import BinaryIO, Optional

from core import xml_tree
from doc_types.config.model import CacheConfig, InputConfig, LocalConfig, RemoteConfig


# ---- shared constants (parser + serializer) ----

ROOT_TAG = "cache"
NAMESPACE = "http://maven.apache.org/BUILD-CACHE-CONFIG/1.0.0"

TAG_CONFIGURATION = "configuration"
TAG_ENABLED = "enabled"
TAG_HASH_ALGORITHM = "hashAlgorithm"
TAG_VALIDATE_XML = "validateXml"
TAG_REMOTE = "remote"
TAG_URL = "url"
TAG_SAVE_TO_REMOTE = "saveToRemote"
TAG_LOCAL = "local"
TAG_MAX_BUILDS_CACHED = "maxBuildsCached"
TAG_LOCATION = "location"
TAG_ATTACHED_OUTPUTS = "attachedOutputs"
TAG_DIR_NAME = "dirName"
TAG_INPUT = "input"
TAG_GLOBAL = "global"
TAG_GLOB = "glob"
TAG_INCLUDES = "includes"
TAG_INCLUDE = "include"
TAG_EXCLUDES = "excludes"
TAG_EXCLUDE = "exclude"

ATTR_ENABLED = "enabled"
ATTR_ID = "id"


def parse(source: BinaryIO) -> CacheConfig:
    """
    Parse a cache configuration document.

    Raises ValueError on structurally invalid documents.
    """
    root = xml_tree.parse_root(source, ROOT_TAG, NAMESPACE)
    defaults = CacheConfig()

    configuration = root.find(TAG_CONFIGURATION)
    if configuration is None:
        configuration = ET.Element(TAG_CONFIGURATION)

    input_el = root.find(TAG_INPUT)
    global_el = input_el.find(TAG_GLOBAL) if input_el is not None else None

    return CacheConfig(
        enabled=xml_tree.bool_text(configuration, TAG_ENABLED, default=defaults.enabled),
        hash_algorithm=_text_or(configuration, TAG_HASH_ALGORITHM, defaults.hash_algorithm),
        validate_xml=xml_tree.bool_text(configuration, TAG_VALIDATE_XML, default=defaults.validate_xml),
        remote=_parse_remote(configuration.find(TAG_REMOTE)),
        local=_parse_local(configuration.find(TAG_LOCAL)),
        attached_outputs=xml_tree.text_list(configuration, TAG_ATTACHED_OUTPUTS, TAG_DIR_NAME),
        input=_parse_input(global_el),
    )


def _text_or(parent: ET.Element, tag: str, default: str) -> str:
    value = xml_tree.text(parent, tag)
    return default if value is None else value


def _parse_remote(element: Optional[ET.Element]) -> RemoteConfig:
    defaults = RemoteConfig()
    if element is None:
        return defaults
    enabled_attr = element.get(ATTR_ENABLED)
    return RemoteConfig(
        enabled=(
            xml_tree.parse_bool(enabled_attr, TAG_REMOTE)
            if enabled_attr is not None
            else defaults.enabled
        ),
        url=xml_tree.text(element, TAG_URL),
        id=element.get(ATTR_ID, defaults.id),
        save_to_remote=xml_tree.bool_text(element, TAG_SAVE_TO_REMOTE, default=defaults.save_to_remote),
    )


def _parse_local(element: Optional[ET.Element]) -> LocalConfig:
    defaults = LocalConfig()
    if element is None:
        return defaults
    return LocalConfig(
        max_builds_cached=xml_tree.int_text(element, TAG_MAX_BUILDS_CACHED, default=defaults.max_builds_cached),
        location=xml_tree.text(element, TAG_LOCATION),
    )


def _parse_input(element: Optional[ET.Element]) -> InputConfig:
    defaults = InputConfig()
    if element is None:
        return defaults
    return InputConfig(
        glob=_text_or(element, TAG_GLOB, defaults.glob),
        includes=xml_tree.text_list(element, TAG_INCLUDES, TAG_INCLUDE),
        excludes=xml_tree.text_list(element, TAG_EXCLUDES, TAG_EXCLUDE),
    )
