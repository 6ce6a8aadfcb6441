"""
Shared XML helpers for the cache document parsers and serializers.

Writers build an ``Element`` tree with unqualified tags and put the
default namespace on the root as a plain ``xmlns`` attribute, so the
global ``ElementTree.register_namespace`` table is never touched.

Readers check the root tag and namespace, then strip the document's own
namespace so parsers navigate by local tag names.  Elements from any
other namespace keep their qualified tag and are never matched.

Text conventions:
    absent element      → None (optional fields are omitted on write)
    ``<tag />``         → "" (an empty string survives the round-trip)
    booleans            → "true" / "false"
    integers            → base-10
    carriage return     → ``&#13;`` (the parser would fold a raw CR into LF)

Text outside the XML 1.0 ``Char`` production cannot be written at all;
``write_tree`` raises ValueError instead of producing unreadable bytes.
"""
from __future__ import annotations

import io
import re
import xml.etree.ElementTree as ET
from typing import BinaryIO, Iterable, Optional


# ---- shared constants (parsers + serializers) ----

ENCODING = "UTF-8"
INDENT = "  "
XMLNS_ATTR = "xmlns"
TRUE = "true"
FALSE = "false"

_NOT_XML_CHAR = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


# ------------------------------------------------------------------
# Writing
# ------------------------------------------------------------------

def new_root(tag: str, namespace: str) -> ET.Element:
    return ET.Element(tag, {XMLNS_ATTR: namespace})


def add_element(parent: ET.Element, tag: str) -> ET.Element:
    return ET.SubElement(parent, tag)


def add_text(parent: ET.Element, tag: str, value: Optional[object]) -> Optional[ET.Element]:
    """Append ``<tag>value</tag>`` to *parent*; ``None`` is skipped."""
    if value is None:
        return None
    child = ET.SubElement(parent, tag)
    child.text = str(value)
    return child


def add_bool(parent: ET.Element, tag: str, value: bool) -> ET.Element:
    child = ET.SubElement(parent, tag)
    child.text = TRUE if value else FALSE
    return child


def add_text_list(
    parent: ET.Element,
    tag: str,
    item_tag: str,
    values: Iterable[str],
) -> Optional[ET.Element]:
    """Append ``<tag><item_tag>v</item_tag>...</tag>``; skipped when empty."""
    values = list(values)
    if not values:
        return None
    wrapper = ET.SubElement(parent, tag)
    for value in values:
        add_text(wrapper, item_tag, value)
    return wrapper


def set_attr(element: ET.Element, name: str, value: Optional[str]) -> None:
    if value is not None:
        element.set(name, value)


def is_xml_char(char: str) -> bool:
    return _NOT_XML_CHAR.match(char) is None


def check_chars(root: ET.Element) -> None:
    """Raise ValueError if any text or attribute under *root* cannot be written."""
    for element in root.iter():
        for value in (element.text, *element.attrib.values()):
            if value is None:
                continue
            bad = _NOT_XML_CHAR.search(value)
            if bad is not None:
                raise ValueError(
                    f"<{element.tag}> contains U+{ord(bad.group()):04X}, "
                    f"which XML 1.0 cannot represent"
                )


def write_tree(root: ET.Element, sink: BinaryIO) -> None:
    """Indent *root* and write it, with an XML declaration, to *sink*."""
    check_chars(root)
    tree = ET.ElementTree(root)
    ET.indent(tree, space=INDENT)
    with io.BytesIO() as buffer:
        tree.write(buffer, encoding=ENCODING, xml_declaration=True)
        # attribute values already carry CR as &#13;; only element text is raw
        sink.write(buffer.getvalue().replace(b"\r", b"&#13;"))


# ------------------------------------------------------------------
# Reading
# ------------------------------------------------------------------

def split_tag(tag: str) -> tuple[Optional[str], str]:
    """Split ``{namespace}local`` into ``(namespace, local)``."""
    if tag.startswith("{"):
        namespace, _, local = tag[1:].partition("}")
        return namespace, local
    return None, tag


def parse_root(source: BinaryIO, tag: str, namespace: str) -> ET.Element:
    """
    Parse *source* and return its root element with *namespace* stripped.

    Raises ``ElementTree.ParseError`` on ill-formed XML, and ValueError
    when the root element is not ``<tag>`` in *namespace* (or in no
    namespace at all).
    """
    root = ET.parse(source).getroot()
    root_ns, local = split_tag(root.tag)
    if local != tag:
        raise ValueError(f"Expected root element <{tag}>, found <{local}>")
    if root_ns is not None and root_ns != namespace:
        raise ValueError(f"Unexpected namespace '{root_ns}' on <{tag}>")

    for element in root.iter():
        if not isinstance(element.tag, str):
            continue
        element_ns, element_local = split_tag(element.tag)
        if element_ns == namespace:
            element.tag = element_local
    return root


def text(parent: ET.Element, tag: str) -> Optional[str]:
    child = parent.find(tag)
    if child is None:
        return None
    return child.text if child.text is not None else ""


def required_text(parent: ET.Element, tag: str) -> str:
    value = text(parent, tag)
    if value is None:
        raise ValueError(f"Missing required element <{tag}> in <{parent.tag}>")
    return value


def required_child(parent: ET.Element, tag: str) -> ET.Element:
    child = parent.find(tag)
    if child is None:
        raise ValueError(f"Missing required element <{tag}> in <{parent.tag}>")
    return child


def parse_bool(raw: str, tag: str) -> bool:
    normalized = raw.strip().lower()
    if normalized == TRUE:
        return True
    if normalized == FALSE:
        return False
    raise ValueError(f"Invalid boolean in <{tag}>: {raw!r}")


def bool_text(parent: ET.Element, tag: str, default: bool) -> bool:
    raw = text(parent, tag)
    return default if raw is None else parse_bool(raw, tag)


def int_text(parent: ET.Element, tag: str, default: int) -> int:
    raw = text(parent, tag)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ValueError(f"Invalid integer in <{tag}>: {raw!r}") from exc


def text_list(parent: ET.Element, tag: str, item_tag: str) -> tuple[str, ...]:
    wrapper = parent.find(tag)
    if wrapper is None:
        return ()
    return tuple(
        child.text if child.text is not None else ""
        for child in wrapper.findall(item_tag)
    )
