import logging
import re
import xml.etree.ElementTree as ET
from typing import Iterator

logger = logging.getLogger(__name__)

NAMESPACE = "http://www.w3.org/2000/svg"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

# Prefixes written on output. Anything else gets an ns0-style prefix from ET.
NAMESPACES = {
    "": NAMESPACE,
    "xlink": XLINK_NAMESPACE,
    "sodipodi": "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
    "inkscape": "http://www.inkscape.org/namespaces/inkscape",
}

ROOT_TAG = "svg"

# Attributes that may carry a paint value, in inspection order.
COLOR_ATTRIBUTES = ("fill", "stroke", "stop-color")
STYLE_ATTRIBUTE = "style"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

# "<?xml-stylesheet ...?>" and other PIs are not declarations.
XML_DECLARATION_RE = re.compile(r"<\?xml\s")
XML_DECLARATION_BYTES_RE = re.compile(rb"<\?xml\s")


def register_namespaces() -> None:
    """Register the output prefixes, overriding any the host registered."""
    for prefix, uri in NAMESPACES.items():
        ET.register_namespace(prefix, uri)


register_namespaces()


def fromstring(data: str | bytes) -> ET.Element:
    """Parse an XML string to an Element, keeping comments and PIs.

    Raises:
        xml.etree.ElementTree.ParseError: If the data is not well-formed XML.
        ValueError: If the declared encoding is not supported by the parser.
    """
    builder = ET.TreeBuilder(insert_comments=True, insert_pis=True)
    parser = ET.XMLParser(target=builder)
    return ET.fromstring(data, parser=parser)


def tostring(node: ET.Element, xml_declaration: bool = False) -> str:
    """Convert an XML node to a string without reformatting whitespace."""
    register_namespaces()
    text = ET.tostring(node, encoding="unicode")
    if xml_declaration:
        return XML_DECLARATION + text
    return text


def has_xml_declaration(data: str | bytes) -> bool:
    """Check whether the document text starts with an XML declaration."""
    if isinstance(data, bytes):
        return bool(
            XML_DECLARATION_BYTES_RE.match(data.lstrip(b"\xef\xbb\xbf \t\r\n"))
        )
    return bool(XML_DECLARATION_RE.match(data.lstrip("\ufeff \t\r\n")))


def local_name(node: ET.Element) -> str:
    """Get the tag name of a node without its namespace."""
    tag = node.tag
    if not isinstance(tag, str):
        # Comments and processing instructions.
        return ""
    return tag.split("}")[-1] if "}" in tag else tag


def is_svg_root(node: ET.Element) -> bool:
    """Check if the node is an <svg> element, with or without namespace."""
    return local_name(node) == ROOT_TAG


def count_elements(node: ET.Element) -> int:
    """Count element nodes in the tree, excluding comments and PIs."""
    return sum(1 for child in node.iter() if isinstance(child.tag, str))


def iter_color_elements(node: ET.Element) -> Iterator[ET.Element]:
    """Iterate elements carrying a fill, stroke, stop-color or style attribute.

    Elements are yielded in document order, including the node itself.
    """
    for element in node.iter():
        if not isinstance(element.tag, str):
            continue
        if STYLE_ATTRIBUTE in element.attrib or any(
            key in element.attrib for key in COLOR_ATTRIBUTES
        ):
            yield element
