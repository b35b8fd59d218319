"""Tests for SVG utility functions."""

import xml.etree.ElementTree as ET

import pytest

from svgrecolor import svg_utils


class TestFromString:
    """Test parsing with comments and processing instructions kept."""

    def test_comments_kept(self) -> None:
        node = svg_utils.fromstring("<svg><!-- note --><rect/></svg>")
        assert node[0].tag is ET.Comment
        assert node[0].text == " note "

    def test_processing_instruction_kept(self) -> None:
        node = svg_utils.fromstring('<svg><?app key="value"?></svg>')
        assert node[0].tag is ET.ProcessingInstruction

    def test_parse_error(self) -> None:
        with pytest.raises(ET.ParseError):
            svg_utils.fromstring("<svg>")

    def test_bytes(self) -> None:
        assert svg_utils.fromstring(b"<svg/>").tag == "svg"


class TestToString:
    """Test serialization."""

    def test_whitespace_untouched(self) -> None:
        text = "<svg>\n  <rect />\n</svg>"
        assert svg_utils.tostring(svg_utils.fromstring(text)) == text

    def test_xml_declaration(self) -> None:
        node = svg_utils.fromstring("<svg/>")
        assert svg_utils.tostring(node, xml_declaration=True) == (
            '<?xml version="1.0" encoding="UTF-8"?>\n<svg />'
        )

    def test_default_namespace(self) -> None:
        node = svg_utils.fromstring(f'<svg xmlns="{svg_utils.NAMESPACE}"><g/></svg>')
        assert svg_utils.tostring(node) == (
            f'<svg xmlns="{svg_utils.NAMESPACE}"><g /></svg>'
        )

    def test_default_namespace_after_host_registration(self) -> None:
        """Test that a prefix registered elsewhere does not leak into output."""
        ET.register_namespace("svg", svg_utils.NAMESPACE)
        try:
            node = svg_utils.fromstring(
                f'<svg xmlns="{svg_utils.NAMESPACE}"><rect/></svg>'
            )
            assert svg_utils.tostring(node) == (
                f'<svg xmlns="{svg_utils.NAMESPACE}"><rect /></svg>'
            )
        finally:
            svg_utils.register_namespaces()

    def test_xlink_prefix(self) -> None:
        node = svg_utils.fromstring(
            f'<svg xmlns="{svg_utils.NAMESPACE}" '
            f'xmlns:xlink="{svg_utils.XLINK_NAMESPACE}"><use xlink:href="#a"/></svg>'
        )
        text = svg_utils.tostring(node)
        assert 'xlink:href="#a"' in text
        assert f'xmlns:xlink="{svg_utils.XLINK_NAMESPACE}"' in text


class TestXmlDeclaration:
    """Test detecting the XML declaration."""

    @pytest.mark.parametrize(
        "data",
        [
            '<?xml version="1.0"?><svg/>',
            '\n  <?xml version="1.0"?><svg/>',
            '\ufeff<?xml version="1.0"?><svg/>',
            b'<?xml version="1.0"?><svg/>',
            b'\xef\xbb\xbf<?xml version="1.0"?><svg/>',
        ],
    )
    def test_present(self, data: str | bytes) -> None:
        assert svg_utils.has_xml_declaration(data)

    @pytest.mark.parametrize(
        "data",
        [
            "<svg/>",
            b"<svg/>",
            "<!-- x --><svg/>",
            '<?xml-stylesheet href="a.css"?><svg/>',
            b'<?xml-stylesheet href="a.css"?><svg/>',
        ],
    )
    def test_absent(self, data: str | bytes) -> None:
        assert not svg_utils.has_xml_declaration(data)


class TestElementHelpers:
    """Test tag and selection helpers."""

    def test_local_name(self) -> None:
        node = svg_utils.fromstring(f'<svg xmlns="{svg_utils.NAMESPACE}"/>')
        assert node.tag == f"{{{svg_utils.NAMESPACE}}}svg"
        assert svg_utils.local_name(node) == "svg"
        assert svg_utils.is_svg_root(node)

    def test_local_name_comment(self) -> None:
        node = svg_utils.fromstring("<svg><!-- x --></svg>")
        assert svg_utils.local_name(node[0]) == ""

    def test_not_svg_root(self) -> None:
        assert not svg_utils.is_svg_root(svg_utils.fromstring("<svgx/>"))

    def test_count_elements(self) -> None:
        node = svg_utils.fromstring("<svg><!-- x --><g><rect/></g></svg>")
        assert svg_utils.count_elements(node) == 3

    def test_iter_color_elements(self) -> None:
        """Test document-order selection of paint-bearing elements."""
        node = svg_utils.fromstring(
            '<svg fill="red"><g><rect id="a" stroke="blue"/><rect id="b"/></g>'
            '<stop id="c" stop-color="#000000"/><text id="d" style="x:y"/>'
            '<circle id="e" fill-opacity="0.5"/></svg>'
        )
        selected = list(svg_utils.iter_color_elements(node))
        assert selected[0] is node
        assert [element.get("id") for element in selected[1:]] == ["a", "c", "d"]
