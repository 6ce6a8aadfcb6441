"""
Parser for aggregate cache report documents.

Root element: <cacheReport xmlns="http://maven.apache.org/BUILD-CACHE-REPORT/1.0.0">
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import BinaryIO

from core import xml_tree
from doc_types.report.model import CacheReport, ProjectReport


# ---- shared constants (parser + serializer) ----

ROOT_TAG = "cacheReport"
NAMESPACE = "http://maven.apache.org/BUILD-CACHE-REPORT/1.0.0"

TAG_PROJECTS = "projects"
TAG_PROJECT = "project"
TAG_GROUP_ID = "groupId"
TAG_ARTIFACT_ID = "artifactId"
TAG_CHECKSUM = "checksum"
TAG_CHECKSUM_MATCHED = "checksumMatched"
TAG_LIFECYCLE_MATCHED = "lifecycleMatched"
TAG_SOURCE = "source"
TAG_SHARED_TO_REMOTE = "sharedToRemote"
TAG_URL = "url"


def parse(source: BinaryIO) -> CacheReport:
    """Parse a cache report document.  Raises ValueError on invalid structure."""
    root = xml_tree.parse_root(source, ROOT_TAG, NAMESPACE)
    wrapper = root.find(TAG_PROJECTS)
    if wrapper is None:
        return CacheReport()
    return CacheReport(
        projects=tuple(_parse_project(el) for el in wrapper.findall(TAG_PROJECT)),
    )


def _parse_project(element: ET.Element) -> ProjectReport:
    return ProjectReport(
        group_id=xml_tree.required_text(element, TAG_GROUP_ID),
        artifact_id=xml_tree.required_text(element, TAG_ARTIFACT_ID),
        checksum=xml_tree.required_text(element, TAG_CHECKSUM),
        checksum_matched=xml_tree.bool_text(element, TAG_CHECKSUM_MATCHED, default=False),
        lifecycle_matched=xml_tree.bool_text(element, TAG_LIFECYCLE_MATCHED, default=False),
        source=xml_tree.text(element, TAG_SOURCE),
        shared_to_remote=xml_tree.bool_text(element, TAG_SHARED_TO_REMOTE, default=False),
        url=xml_tree.text(element, TAG_URL),
    )
