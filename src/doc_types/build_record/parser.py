"""
Parser for build record documents.

Root element: <build xmlns="http://maven.apache.org/BUILD-CACHE-BUILD/1.0.0">
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import BinaryIO

from core import xml_tree
from doc_types.build_record.model import Artifact, BuildRecord, DigestItem


# ---- shared constants (parser + serializer) ----

ROOT_TAG = "build"
NAMESPACE = "http://maven.apache.org/BUILD-CACHE-BUILD/1.0.0"

TAG_CACHE_IMPLEMENTATION_VERSION = "cacheImplementationVersion"
TAG_PROJECT = "project"
TAG_HASH_ALGORITHM = "hashAlgorithm"
TAG_FINAL = "final"
TAG_GOALS = "goals"
TAG_GOAL = "goal"
TAG_ARTIFACT = "artifact"
TAG_ATTACHED_ARTIFACTS = "attachedArtifacts"
TAG_INPUT_INFO = "projectsInputInfo"
TAG_CHECKSUM = "checksum"
TAG_ITEM = "item"

TAG_GROUP_ID = "groupId"
TAG_ARTIFACT_ID = "artifactId"
TAG_VERSION = "version"
TAG_TYPE = "type"
TAG_CLASSIFIER = "classifier"
TAG_SCOPE = "scope"
TAG_FILE_NAME = "fileName"
TAG_FILE_HASH = "fileHash"
TAG_FILE_SIZE = "fileSize"

TAG_HASH = "hash"
TAG_FILE_CHECKSUM = "fileChecksum"
TAG_VALUE = "value"


def parse(source: BinaryIO) -> BuildRecord:
    """
    Parse a build record document.

    Raises ValueError on structurally invalid documents and lets
    ``ElementTree.ParseError`` escape on ill-formed XML.
    """
    root = xml_tree.parse_root(source, ROOT_TAG, NAMESPACE)

    input_info = xml_tree.required_child(root, TAG_INPUT_INFO)
    artifact_el = root.find(TAG_ARTIFACT)
    attached_el = root.find(TAG_ATTACHED_ARTIFACTS)

    return BuildRecord(
        project=xml_tree.required_text(root, TAG_PROJECT),
        checksum=xml_tree.required_text(input_info, TAG_CHECKSUM),
        cache_implementation_version=xml_tree.text(root, TAG_CACHE_IMPLEMENTATION_VERSION),
        hash_algorithm=xml_tree.required_text(root, TAG_HASH_ALGORITHM),
        final=xml_tree.bool_text(root, TAG_FINAL, default=False),
        goals=xml_tree.text_list(root, TAG_GOALS, TAG_GOAL),
        artifact=_parse_artifact(artifact_el) if artifact_el is not None else None,
        attached_artifacts=(
            tuple(_parse_artifact(el) for el in attached_el.findall(TAG_ARTIFACT))
            if attached_el is not None
            else ()
        ),
        inputs=tuple(_parse_item(el) for el in input_info.findall(TAG_ITEM)),
    )


def _parse_artifact(element: ET.Element) -> Artifact:
    return Artifact(
        group_id=xml_tree.required_text(element, TAG_GROUP_ID),
        artifact_id=xml_tree.required_text(element, TAG_ARTIFACT_ID),
        version=xml_tree.text(element, TAG_VERSION),
        type=xml_tree.required_text(element, TAG_TYPE),
        classifier=xml_tree.text(element, TAG_CLASSIFIER),
        scope=xml_tree.text(element, TAG_SCOPE),
        file_name=xml_tree.text(element, TAG_FILE_NAME),
        file_hash=xml_tree.text(element, TAG_FILE_HASH),
        file_size=xml_tree.int_text(element, TAG_FILE_SIZE, default=0),
    )


def _parse_item(element: ET.Element) -> DigestItem:
    # every digest field is an attribute so digest lists stay compact and
    # value="" stays distinct from an absent value
    item_type = element.get(TAG_TYPE)
    item_hash = element.get(TAG_HASH)
    if item_type is None or item_hash is None:
        raise ValueError(f"<{TAG_ITEM}> requires '{TAG_TYPE}' and '{TAG_HASH}' attributes")
    return DigestItem(
        type=item_type,
        hash=item_hash,
        file_checksum=element.get(TAG_FILE_CHECKSUM),
        value=element.get(TAG_VALUE),
    )
