import dataclasses
import logging
import re
from re import Pattern
from typing import Iterator, Mapping

from svgrecolor.color_utils import normalize_color

logger = logging.getLogger(__name__)

# A paint declaration inside a style attribute. The value runs until the next
# ';' or the end of the string.
COLOR_DECLARATION_RE: Pattern[str] = re.compile(
    r"(?<![\w-])(?P<property>fill|stroke|stop-color)\s*:\s*(?P<value>[^;]+)",
    re.IGNORECASE,
)


@dataclasses.dataclass(frozen=True)
class Declaration:
    """Paint declaration found in a style string.

    ``start`` and ``end`` delimit the value with surrounding whitespace
    excluded, so that replacing ``style[start:end]`` leaves the rest of the
    declaration text intact.
    """

    property: str
    value: str
    start: int
    end: int

    @property
    def color(self) -> str | None:
        """Canonical color of the value, or None if it is not a color."""
        return normalize_color(self.value)


def iter_color_declarations(style: str) -> Iterator[Declaration]:
    """Iterate fill, stroke and stop-color declarations of a style string."""
    for match in COLOR_DECLARATION_RE.finditer(style):
        raw = match.group("value")
        value = raw.strip()
        start = match.start("value") + (len(raw) - len(raw.lstrip()))
        yield Declaration(
            property=match.group("property"),
            value=value,
            start=start,
            end=start + len(value),
        )


def extract_colors(style: str) -> list[str]:
    """Extract canonical colors from the paint declarations of a style string."""
    colors = []
    for declaration in iter_color_declarations(style):
        color = declaration.color
        if color is not None:
            colors.append(color)
    return colors


def replace_colors(style: str, mapping: Mapping[str, str]) -> str:
    """Replace mapped colors in a style string.

    Only the value span of matching declarations changes. Property names,
    whitespace, and any other declaration (such as ``opacity``) are kept
    byte-identical.

    Example:
        >>> replace_colors("Fill : red; opacity:0.7", {"#FF0000": "#003366"})
        'Fill : #003366; opacity:0.7'
    """
    chunks = []
    position = 0
    for declaration in iter_color_declarations(style):
        color = declaration.color
        if color is None or color not in mapping:
            continue
        chunks.append(style[position : declaration.start])
        chunks.append(mapping[color])
        position = declaration.end
    if not chunks:
        return style
    chunks.append(style[position:])
    return "".join(chunks)
