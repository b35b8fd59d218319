"""Exceptions raised by svgrecolor.

Each exception keeps the diagnostics collected up to the failure in
``errors``, so callers can report them without parsing the message.
"""


class SVGColorError(Exception):
    """Base class for recoloring errors."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors: list[str] = list(errors) if errors is not None else [message]


class SVGParseError(SVGColorError, ValueError):
    """The input could not be parsed into a document tree."""


class InvalidRootElementError(SVGParseError):
    """The input is well-formed XML but its root element is not <svg>."""


class NoDocumentError(SVGColorError, RuntimeError):
    """Colors were requested before a document was successfully parsed."""


class InvalidPaletteError(SVGColorError, ValueError):
    """The palette is missing a slot or holds a value that is not a color."""
