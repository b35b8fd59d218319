import dataclasses
import logging
from typing import Mapping, Sequence

from svgrecolor.color_utils import normalize_color, rank_colors
from svgrecolor.errors import InvalidPaletteError

logger = logging.getLogger(__name__)

PALETTE_SLOTS = ("primary", "secondary", "accent", "neutral")


@dataclasses.dataclass(frozen=True)
class Palette:
    """Four target colors for recoloring.

    Slot names carry no brightness order; the mapper ranks the colors by
    luminance itself. Values are normalized to uppercase ``#RRGGBB``.

    Example usage::

        palette = Palette.from_dict(
            {
                "primary": "#003366",
                "secondary": "#0066CC",
                "accent": "#00CCFF",
                "neutral": "#E6F2FF",
            }
        )
        mapping = create_color_mapping(["#000000", "#FFFFFF"], palette)
    """

    primary: str
    secondary: str
    accent: str
    neutral: str

    def __post_init__(self) -> None:
        for slot in PALETTE_SLOTS:
            value = getattr(self, slot)
            color = normalize_color(value) if isinstance(value, str) else None
            if color is None:
                raise InvalidPaletteError(
                    f"Palette slot '{slot}' is not a valid color: {value!r}"
                )
            object.__setattr__(self, slot, color)

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> "Palette":
        """Create a palette from a mapping with the four slot names."""
        missing = [slot for slot in PALETTE_SLOTS if slot not in data]
        if missing:
            raise InvalidPaletteError(
                f"Palette is missing slots: {', '.join(missing)}"
            )
        return cls(**{slot: data[slot] for slot in PALETTE_SLOTS})

    @classmethod
    def coerce(cls, palette: "Palette | Mapping[str, str]") -> "Palette":
        """Return the palette as-is, or build one from a mapping."""
        if isinstance(palette, Palette):
            return palette
        return cls.from_dict(palette)

    @property
    def colors(self) -> tuple[str, str, str, str]:
        """Colors in slot order."""
        return (self.primary, self.secondary, self.accent, self.neutral)

    def ranked(self) -> list[str]:
        """Colors ordered from darkest to lightest."""
        return rank_colors(self.colors)

    def to_dict(self) -> dict[str, str]:
        return dataclasses.asdict(self)


def palette_index(index: int, count: int, size: int = len(PALETTE_SLOTS)) -> int:
    """Get the palette position for the index-th darkest of count colors.

    The darkest color takes the first position and the lightest the last;
    colors in between take ``round(index * (size - 1) / (count - 1))`` with
    halves rounded away from zero. The rounding uses integer arithmetic so
    that it is exact.
    """
    last = size - 1
    if count <= 1 or index <= 0:
        return 0
    if index >= count - 1:
        return last
    position = (2 * index * last + (count - 1)) // (2 * (count - 1))
    return max(0, min(last, position))


def create_color_mapping(
    colors: Sequence[str], palette: Palette | Mapping[str, str]
) -> dict[str, str]:
    """Map each detected color to a palette color by luminance rank.

    Args:
        colors: Canonical colors in appearance order, without duplicates.
        palette: Target palette, or a mapping with the four slot names.

    Returns:
        Dictionary from every input color to one palette color.
    """
    palette = Palette.coerce(palette)
    ordered_palette = palette.ranked()
    ordered_colors = rank_colors(colors)
    count = len(ordered_colors)

    mapping = {
        color: ordered_palette[palette_index(i, count, len(ordered_palette))]
        for i, color in enumerate(ordered_colors)
    }
    logger.debug(f"Mapped {count} colors onto palette: {mapping}")
    return mapping
