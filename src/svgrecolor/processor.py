import logging
from typing import Mapping

from svgrecolor.document import ParseResult, ProcessResult, parse
from svgrecolor.errors import NoDocumentError, SVGParseError
from svgrecolor.palette import Palette
from svgrecolor.resource_limits import ResourceLimits

logger = logging.getLogger(__name__)


class SVGColorProcessor:
    """Stateful SVG recoloring processor.

    Holds the last parsed document and the diagnostics of the last parse.
    Every call to :meth:`parse` starts from a clean state, so one instance
    can be reused for many documents, but not from several threads at once.
    For concurrent use, call :func:`svgrecolor.parse` and work with the
    returned :class:`ParseResult` instead.

    Example usage::

        processor = SVGColorProcessor()
        if processor.parse(svg_text):
            processor.detect_colors()  # ['#FF0000', '#00FF00']
            recolored = processor.replace_colors(palette)
        else:
            processor.errors  # ['XML Error: ...']
    """

    def __init__(self, limits: ResourceLimits | None = None) -> None:
        self.limits = limits
        self.reset()

    def reset(self) -> None:
        """Clear the document, diagnostics, and detected colors."""
        self._result: ParseResult | None = None
        self._errors: list[str] = []

    def parse(self, text: str | bytes) -> bool:
        """Parse SVG text, returning True on success.

        Failures are recorded in :attr:`errors` rather than raised.
        """
        self.reset()
        try:
            self._result = parse(text, limits=self.limits)
        except SVGParseError as e:
            self._errors.extend(e.errors)
            logger.debug(f"SVG parse failed: {e}")
            return False
        return True

    @property
    def result(self) -> ParseResult | None:
        """Result of the last successful parse."""
        return self._result

    @property
    def errors(self) -> list[str]:
        """Diagnostics recorded by the last parse, in order."""
        return list(self._errors)

    def detect_colors(self) -> list[str]:
        """Get colors detected by the last parse, empty if it failed."""
        if self._result is None:
            return []
        return self._result.detect_colors()

    def create_color_mapping(
        self, palette: Palette | Mapping[str, str]
    ) -> dict[str, str]:
        """Map detected colors onto the palette."""
        if self._result is None:
            return {}
        return self._result.create_color_mapping(palette)

    def replace_colors(
        self, palette: Palette | Mapping[str, str], strict: bool = False
    ) -> str:
        """Recolor the parsed document with the palette.

        Args:
            palette: Target palette, or a mapping with the four slot names.
            strict: Raise NoDocumentError instead of returning an empty string
                when there is no successfully parsed document.
        """
        if self._result is None:
            if strict:
                raise NoDocumentError("No SVG document has been parsed successfully")
            logger.warning("replace_colors() called without a parsed SVG document")
            return ""
        return self._result.replace_colors(palette)

    def process_svg(
        self, text: str | bytes, palette: Palette | Mapping[str, str]
    ) -> dict[str, bool | str | list[str]]:
        """Parse and recolor in one call.

        Returns:
            ``{"success": True, "svg": ...}`` or
            ``{"success": False, "errors": [...]}``.
        """
        palette = Palette.coerce(palette)
        if not self.parse(text):
            return ProcessResult(success=False, errors=tuple(self._errors)).to_dict()
        return ProcessResult(success=True, svg=self.replace_colors(palette)).to_dict()
