import dataclasses
import logging
import xml.etree.ElementTree as ET
from copy import deepcopy
from typing import Mapping

from svgrecolor import style_utils, svg_utils
from svgrecolor.color_utils import normalize_color
from svgrecolor.errors import InvalidRootElementError, SVGParseError
from svgrecolor.palette import Palette, create_color_mapping
from svgrecolor.resource_limits import ResourceLimits

logger = logging.getLogger(__name__)

INVALID_ROOT_MESSAGE = "Invalid SVG: root element must be svg"


@dataclasses.dataclass(frozen=True)
class ParseResult:
    """Parsed SVG document and the colors it uses.

    The tree is treated as read-only: recoloring always works on a deep copy,
    so one result can be recolored with any number of palettes.

    Example usage::

        from svgrecolor import parse

        result = parse(svg_text)
        result.colors  # ('#FF0000', '#0000FF')
        recolored = result.replace_colors(
            {
                "primary": "#003366",
                "secondary": "#0066CC",
                "accent": "#00CCFF",
                "neutral": "#E6F2FF",
            }
        )
    """

    svg: ET.Element
    colors: tuple[str, ...]
    xml_declaration: bool = False

    def detect_colors(self) -> list[str]:
        """Get detected colors in order of first appearance."""
        return list(self.colors)

    def create_color_mapping(
        self, palette: Palette | Mapping[str, str]
    ) -> dict[str, str]:
        """Map the detected colors onto the palette."""
        return create_color_mapping(self.colors, palette)

    def replace_colors(self, palette: Palette | Mapping[str, str]) -> str:
        """Recolor a copy of the document and serialize it."""
        return replace_colors(self, palette)

    def tostring(self) -> str:
        """Serialize the unmodified document."""
        return svg_utils.tostring(self.svg, xml_declaration=self.xml_declaration)


@dataclasses.dataclass(frozen=True)
class ProcessResult:
    """Outcome of :func:`process_svg`."""

    success: bool
    svg: str = ""
    errors: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, bool | str | list[str]]:
        if self.success:
            return {"success": True, "svg": self.svg}
        return {"success": False, "errors": list(self.errors)}


def parse(text: str | bytes, limits: ResourceLimits | None = None) -> ParseResult:
    """Parse SVG text and detect its colors.

    Args:
        text: SVG document as a string or UTF-8 bytes.
        limits: Resource limits. Defaults to ``ResourceLimits.default()``.

    Raises:
        SVGParseError: If the text exceeds the limits or is not well-formed XML.
        InvalidRootElementError: If the root element is not <svg>.
    """
    if limits is None:
        limits = ResourceLimits.default()

    size = len(text.encode("utf-8")) if isinstance(text, str) else len(text)
    message = limits.check_input_size(size)
    if message:
        raise SVGParseError(message)

    try:
        svg = svg_utils.fromstring(text)
    except (ET.ParseError, ValueError) as e:
        raise SVGParseError(f"XML Error: {e}") from e

    if not svg_utils.is_svg_root(svg):
        logger.debug(f"Rejected root element: {svg.tag}")
        raise InvalidRootElementError(INVALID_ROOT_MESSAGE)

    message = limits.check_element_count(svg_utils.count_elements(svg))
    if message:
        raise SVGParseError(message)

    colors = detect_colors(svg)
    logger.debug(f"Detected {len(colors)} colors: {colors}")
    return ParseResult(
        svg=svg,
        colors=colors,
        xml_declaration=svg_utils.has_xml_declaration(text),
    )


def detect_colors(svg: ET.Element) -> tuple[str, ...]:
    """Collect canonical colors from paint attributes and style declarations.

    Returns:
        Colors in order of first appearance, without duplicates.
    """
    colors: dict[str, None] = {}
    for element in svg_utils.iter_color_elements(svg):
        for key in svg_utils.COLOR_ATTRIBUTES:
            value = element.get(key)
            if value is None:
                continue
            color = normalize_color(value)
            if color is not None:
                colors.setdefault(color, None)

        style = element.get(svg_utils.STYLE_ATTRIBUTE)
        if style is not None:
            for color in style_utils.extract_colors(style):
                colors.setdefault(color, None)
    return tuple(colors)


def rewrite_colors(svg: ET.Element, mapping: Mapping[str, str]) -> int:
    """Replace mapped colors in the tree in-place.

    Attributes whose value is not a mapped color (``none``, ``url(...)``,
    unrecognized formats) are left untouched.

    Returns:
        Number of attribute values and style declarations replaced.
    """
    replaced = 0
    for element in svg_utils.iter_color_elements(svg):
        for key in svg_utils.COLOR_ATTRIBUTES:
            value = element.get(key)
            if value is None:
                continue
            color = normalize_color(value)
            if color is not None and color in mapping:
                element.set(key, mapping[color])
                replaced += 1

        style = element.get(svg_utils.STYLE_ATTRIBUTE)
        if style is None:
            continue
        new_style = style_utils.replace_colors(style, mapping)
        if new_style != style:
            element.set(svg_utils.STYLE_ATTRIBUTE, new_style)
            replaced += sum(
                1
                for declaration in style_utils.iter_color_declarations(style)
                if declaration.color in mapping
            )
    return replaced


def replace_colors(result: ParseResult, palette: Palette | Mapping[str, str]) -> str:
    """Recolor a copy of the parsed document with the palette.

    Args:
        result: Parsed document. Its tree is not modified.
        palette: Target palette, or a mapping with the four slot names.

    Returns:
        Serialized SVG text.
    """
    mapping = create_color_mapping(result.colors, palette)
    svg = deepcopy(result.svg)
    replaced = rewrite_colors(svg, mapping)
    logger.debug(f"Replaced {replaced} color values")
    return svg_utils.tostring(svg, xml_declaration=result.xml_declaration)


def process_svg(
    text: str | bytes,
    palette: Palette | Mapping[str, str],
    limits: ResourceLimits | None = None,
) -> ProcessResult:
    """Parse SVG text and recolor it with the palette.

    Malformed input is reported through the result instead of raising.

    Raises:
        InvalidPaletteError: If the palette is invalid.
    """
    palette = Palette.coerce(palette)
    try:
        result = parse(text, limits=limits)
    except SVGParseError as e:
        logger.warning(f"Cannot recolor SVG: {'; '.join(e.errors)}")
        return ProcessResult(success=False, errors=tuple(e.errors))
    return ProcessResult(success=True, svg=result.replace_colors(palette))
