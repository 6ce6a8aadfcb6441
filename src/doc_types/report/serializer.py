"""Serializer for aggregate cache report documents."""
from __future__ import annotations

from typing import BinaryIO

from core import xml_tree
from doc_types.report.model import CacheReport
from doc_types.report.parser import (
    ROOT_TAG, NAMESPACE, TAG_PROJECTS, TAG_PROJECT,
    TAG_GROUP_ID, TAG_ARTIFACT_ID, TAG_CHECKSUM,
    TAG_CHECKSUM_MATCHED, TAG_LIFECYCLE_MATCHED,
    TAG_SOURCE, TAG_SHARED_TO_REMOTE, TAG_URL,
)


def serialize(report: CacheReport, sink: BinaryIO) -> None:
    root = xml_tree.new_root(ROOT_TAG, NAMESPACE)

    if report.projects:
        wrapper = xml_tree.add_element(root, TAG_PROJECTS)
        for project in report.projects:
            element = xml_tree.add_element(wrapper, TAG_PROJECT)
            xml_tree.add_text(element, TAG_GROUP_ID, project.group_id)
            xml_tree.add_text(element, TAG_ARTIFACT_ID, project.artifact_id)
            xml_tree.add_text(element, TAG_CHECKSUM, project.checksum)
            xml_tree.add_bool(element, TAG_CHECKSUM_MATCHED, project.checksum_matched)
            xml_tree.add_bool(element, TAG_LIFECYCLE_MATCHED, project.lifecycle_matched)
            xml_tree.add_text(element, TAG_SOURCE, project.source)
            xml_tree.add_bool(element, TAG_SHARED_TO_REMOTE, project.shared_to_remote)
            xml_tree.add_text(element, TAG_URL, project.url)

    xml_tree.write_tree(root, sink)
