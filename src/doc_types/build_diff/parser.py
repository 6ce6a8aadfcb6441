"""
Parser for build diff documents.

Root element: <diff xmlns="http://maven.apache.org/BUILD-CACHE-DIFF/1.0.0">
Each mismatch is an empty element whose fields are attributes.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import BinaryIO

from core import xml_tree
from doc_types.build_diff.model import BuildDiff, Mismatch


# ---- shared constants (parser + serializer) ----

ROOT_TAG = "diff"
NAMESPACE = "http://maven.apache.org/BUILD-CACHE-DIFF/1.0.0"

TAG_MISMATCHES = "mismatches"
TAG_MISMATCH = "mismatch"

ATTR_ITEM = "item"
ATTR_CURRENT = "current"
ATTR_BASELINE = "baseline"
ATTR_REASON = "reason"
ATTR_RESOLUTION = "resolution"
ATTR_CONTEXT = "context"


def parse(source: BinaryIO) -> BuildDiff:
    """Parse a build diff document.  Raises ValueError on invalid structure."""
    root = xml_tree.parse_root(source, ROOT_TAG, NAMESPACE)
    wrapper = root.find(TAG_MISMATCHES)
    if wrapper is None:
        return BuildDiff()
    return BuildDiff(
        mismatches=tuple(_parse_mismatch(el) for el in wrapper.findall(TAG_MISMATCH)),
    )


def _parse_mismatch(element: ET.Element) -> Mismatch:
    item = element.get(ATTR_ITEM)
    if item is None:
        raise ValueError(f"<{TAG_MISMATCH}> is missing the '{ATTR_ITEM}' attribute")
    return Mismatch(
        item=item,
        current=element.get(ATTR_CURRENT),
        baseline=element.get(ATTR_BASELINE),
        reason=element.get(ATTR_REASON),
        resolution=element.get(ATTR_RESOLUTION),
        context=element.get(ATTR_CONTEXT),
    )
