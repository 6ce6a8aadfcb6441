"""
Serializer for build record documents.

Element order is fixed so the same record always yields the same bytes.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import BinaryIO

from core import xml_tree
from doc_types.build_record.model import Artifact, BuildRecord, DigestItem
from doc_types.build_record.parser import (
    ROOT_TAG, NAMESPACE,
    TAG_CACHE_IMPLEMENTATION_VERSION, TAG_PROJECT, TAG_HASH_ALGORITHM, TAG_FINAL,
    TAG_GOALS, TAG_GOAL, TAG_ARTIFACT, TAG_ATTACHED_ARTIFACTS,
    TAG_INPUT_INFO, TAG_CHECKSUM, TAG_ITEM,
    TAG_GROUP_ID, TAG_ARTIFACT_ID, TAG_VERSION, TAG_TYPE, TAG_CLASSIFIER, TAG_SCOPE,
    TAG_FILE_NAME, TAG_FILE_HASH, TAG_FILE_SIZE,
    TAG_HASH, TAG_FILE_CHECKSUM, TAG_VALUE,
)


def serialize(record: BuildRecord, sink: BinaryIO) -> None:
    """Write *record* as a complete build record document to *sink*."""
    root = xml_tree.new_root(ROOT_TAG, NAMESPACE)

    xml_tree.add_text(root, TAG_CACHE_IMPLEMENTATION_VERSION, record.cache_implementation_version)
    xml_tree.add_text(root, TAG_PROJECT, record.project)
    xml_tree.add_text(root, TAG_HASH_ALGORITHM, record.hash_algorithm)
    xml_tree.add_bool(root, TAG_FINAL, record.final)
    xml_tree.add_text_list(root, TAG_GOALS, TAG_GOAL, record.goals)

    if record.artifact is not None:
        _add_artifact(root, record.artifact)

    if record.attached_artifacts:
        attached = xml_tree.add_element(root, TAG_ATTACHED_ARTIFACTS)
        for artifact in record.attached_artifacts:
            _add_artifact(attached, artifact)

    input_info = xml_tree.add_element(root, TAG_INPUT_INFO)
    xml_tree.add_text(input_info, TAG_CHECKSUM, record.checksum)
    for item in record.inputs:
        _add_item(input_info, item)

    xml_tree.write_tree(root, sink)


def _add_artifact(parent: ET.Element, artifact: Artifact) -> None:
    element = xml_tree.add_element(parent, TAG_ARTIFACT)
    xml_tree.add_text(element, TAG_GROUP_ID, artifact.group_id)
    xml_tree.add_text(element, TAG_ARTIFACT_ID, artifact.artifact_id)
    xml_tree.add_text(element, TAG_VERSION, artifact.version)
    xml_tree.add_text(element, TAG_TYPE, artifact.type)
    xml_tree.add_text(element, TAG_CLASSIFIER, artifact.classifier)
    xml_tree.add_text(element, TAG_SCOPE, artifact.scope)
    xml_tree.add_text(element, TAG_FILE_NAME, artifact.file_name)
    xml_tree.add_text(element, TAG_FILE_HASH, artifact.file_hash)
    xml_tree.add_text(element, TAG_FILE_SIZE, artifact.file_size)


def _add_item(parent: ET.Element, item: DigestItem) -> None:
    element = xml_tree.add_element(parent, TAG_ITEM)
    element.set(TAG_TYPE, item.type)
    element.set(TAG_HASH, item.hash)
    xml_tree.set_attr(element, TAG_FILE_CHECKSUM, item.file_checksum)
    xml_tree.set_attr(element, TAG_VALUE, item.value)
