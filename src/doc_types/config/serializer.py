"""
Serializer for cache configuration documents.

All sections are always written so the output documents every
effective setting, not just the overridden ones.
"""
from __future__ import annotations

from typing import BinaryIO

from core import xml_tree
from doc_types.config.model import CacheConfig
from doc_types.config.parser import (
    ROOT_TAG, NAMESPACE,
    TAG_CONFIGURATION, TAG_ENABLED, TAG_HASH_ALGORITHM, TAG_VALIDATE_XML,
    TAG_REMOTE, TAG_URL, TAG_SAVE_TO_REMOTE,
    TAG_LOCAL, TAG_MAX_BUILDS_CACHED, TAG_LOCATION,
    TAG_ATTACHED_OUTPUTS, TAG_DIR_NAME,
    TAG_INPUT, TAG_GLOBAL, TAG_GLOB, TAG_INCLUDES, TAG_INCLUDE, TAG_EXCLUDES, TAG_EXCLUDE,
    ATTR_ENABLED, ATTR_ID,
)


def serialize(config: CacheConfig, sink: BinaryIO) -> None:
    """Write *config* as a complete cache configuration document to *sink*."""
    root = xml_tree.new_root(ROOT_TAG, NAMESPACE)

    configuration = xml_tree.add_element(root, TAG_CONFIGURATION)
    xml_tree.add_bool(configuration, TAG_ENABLED, config.enabled)
    xml_tree.add_text(configuration, TAG_HASH_ALGORITHM, config.hash_algorithm)
    xml_tree.add_bool(configuration, TAG_VALIDATE_XML, config.validate_xml)

    remote = xml_tree.add_element(configuration, TAG_REMOTE)
    remote.set(ATTR_ENABLED, xml_tree.TRUE if config.remote.enabled else xml_tree.FALSE)
    remote.set(ATTR_ID, config.remote.id)
    xml_tree.add_text(remote, TAG_URL, config.remote.url)
    xml_tree.add_bool(remote, TAG_SAVE_TO_REMOTE, config.remote.save_to_remote)

    local = xml_tree.add_element(configuration, TAG_LOCAL)
    xml_tree.add_text(local, TAG_MAX_BUILDS_CACHED, config.local.max_builds_cached)
    xml_tree.add_text(local, TAG_LOCATION, config.local.location)

    xml_tree.add_text_list(configuration, TAG_ATTACHED_OUTPUTS, TAG_DIR_NAME, config.attached_outputs)

    global_el = xml_tree.add_element(xml_tree.add_element(root, TAG_INPUT), TAG_GLOBAL)
    xml_tree.add_text(global_el, TAG_GLOB, config.input.glob)
    xml_tree.add_text_list(global_el, TAG_INCLUDES, TAG_INCLUDE, config.input.includes)
    xml_tree.add_text_list(global_el, TAG_EXCLUDES, TAG_EXCLUDE, config.input.excludes)

    xml_tree.write_tree(root, sink)
