"""Serializer for build diff documents."""
from __future__ import annotations

from typing import BinaryIO

from core import xml_tree
from doc_types.build_diff.model import BuildDiff
from doc_types.build_diff.parser import (
    ROOT_TAG, NAMESPACE, TAG_MISMATCHES, TAG_MISMATCH,
    ATTR_ITEM, ATTR_CURRENT, ATTR_BASELINE, ATTR_REASON, ATTR_RESOLUTION, ATTR_CONTEXT,
)


def serialize(diff: BuildDiff, sink: BinaryIO) -> None:
    root = xml_tree.new_root(ROOT_TAG, NAMESPACE)

    if diff.mismatches:
        wrapper = xml_tree.add_element(root, TAG_MISMATCHES)
        for mismatch in diff.mismatches:
            element = xml_tree.add_element(wrapper, TAG_MISMATCH)
            element.set(ATTR_ITEM, mismatch.item)
            xml_tree.set_attr(element, ATTR_CURRENT, mismatch.current)
            xml_tree.set_attr(element, ATTR_BASELINE, mismatch.baseline)
            xml_tree.set_attr(element, ATTR_REASON, mismatch.reason)
            xml_tree.set_attr(element, ATTR_RESOLUTION, mismatch.resolution)
            xml_tree.set_attr(element, ATTR_CONTEXT, mismatch.context)

    xml_tree.write_tree(root, sink)
