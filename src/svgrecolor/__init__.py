from logging import getLogger
from typing import Mapping

from svgrecolor.document import (
    ParseResult,
    ProcessResult,
    detect_colors,
    parse,
    process_svg,
    replace_colors,
)
from svgrecolor.errors import (
    InvalidPaletteError,
    InvalidRootElementError,
    NoDocumentError,
    SVGColorError,
    SVGParseError,
)
from svgrecolor.palette import PALETTE_SLOTS, Palette, create_color_mapping
from svgrecolor.processor import SVGColorProcessor
from svgrecolor.resource_limits import ResourceLimits
from svgrecolor.version import __version__ as __version__

logger = getLogger(__name__)

__all__ = [
    "PALETTE_SLOTS",
    "InvalidPaletteError",
    "InvalidRootElementError",
    "NoDocumentError",
    "Palette",
    "ParseResult",
    "ProcessResult",
    "ResourceLimits",
    "SVGColorError",
    "SVGColorProcessor",
    "SVGParseError",
    "create_color_mapping",
    "detect_colors",
    "parse",
    "process_svg",
    "recolor",
    "replace_colors",
]


def recolor(text: str | bytes, palette: Palette | Mapping[str, str]) -> str:
    """Recolor SVG text with the palette.

    Raises:
        SVGParseError: If the text is not a valid SVG document.
    """
    return parse(text).replace_colors(palette)
