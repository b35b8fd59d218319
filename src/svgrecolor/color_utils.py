import logging
import re
from typing import Sequence

import numpy as np
from PIL import ImageColor

logger = logging.getLogger(__name__)

# Named colors recognized in fill/stroke/stop-color values.
CSS_COLORS: dict[str, str] = {
    "red": "#FF0000",
    "green": "#008000",
    "blue": "#0000FF",
    "black": "#000000",
    "white": "#FFFFFF",
    "yellow": "#FFFF00",
    "cyan": "#00FFFF",
    "magenta": "#FF00FF",
    "silver": "#C0C0C0",
    "gray": "#808080",
    "maroon": "#800000",
    "olive": "#808000",
    "lime": "#00FF00",
    "aqua": "#00FFFF",
    "teal": "#008080",
    "navy": "#000080",
    "fuchsia": "#FF00FF",
    "purple": "#800080",
    "orange": "#FFA500",
    "brown": "#A52A2A",
    "pink": "#FFC0CB",
}

NON_COLOR_KEYWORDS = frozenset({"none", "transparent", "inherit", "currentcolor"})

HEX_COLOR_RE = re.compile(r"#([0-9a-fA-F]{6})")
RGB_COLOR_RE = re.compile(
    r"rgb\s*\(\s*([0-9]+)\s*,\s*([0-9]+)\s*,\s*([0-9]+)\s*\)", re.IGNORECASE
)
CANONICAL_COLOR_RE = re.compile(r"#[0-9A-F]{6}")

# ITU-R BT.709 weights applied to non-linearized channels.
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


def normalize_color(value: str) -> str | None:
    """Normalize a paint value to an uppercase ``#RRGGBB`` string.

    Returns None for values that are not plain colors: keywords such as
    ``none`` or ``currentColor``, ``url(...)`` references, and formats that
    are not recognized (3-digit hex, ``hsl()``, unknown names).
    """
    value = value.strip()
    lowered = value.lower()

    if lowered in NON_COLOR_KEYWORDS:
        return None

    # Gradient and pattern references keep their target untouched.
    if lowered.startswith("url("):
        return None

    match = HEX_COLOR_RE.fullmatch(value)
    if match:
        return "#" + match.group(1).upper()

    match = RGB_COLOR_RE.fullmatch(value)
    if match:
        r, g, b = (clip_int(int(channel)) for channel in match.groups())
        return rgb2hex((r, g, b))

    return CSS_COLORS.get(lowered)


def is_canonical(color: str) -> bool:
    """Check if the string is an uppercase ``#RRGGBB`` color."""
    return CANONICAL_COLOR_RE.fullmatch(color) is not None


def rgb2hex(rgb: Sequence[int]) -> str:
    """Convert RGB channels in [0, 255] to an uppercase hex string."""
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


def hex2rgb(color: str) -> tuple[int, int, int]:
    """Decode a canonical ``#RRGGBB`` color to integer channels."""
    if not is_canonical(color):
        raise ValueError(f"Not a canonical color: {color!r}")
    r, g, b = ImageColor.getrgb(color)[:3]
    return r, g, b


def clip_int(value: int | float, min_value: int = 0, max_value: int = 255) -> int:
    """Clip an int value to the specified range."""
    return max(min_value, min(max_value, int(value)))


def luminances(colors: Sequence[str]) -> np.ndarray:
    """Compute the brightness score of each canonical color.

    The weighted sum is evaluated channel by channel, so every entry is
    bit-identical to the scalar formula ``0.2126*R + 0.7152*G + 0.0722*B``.
    """
    if len(colors) == 0:
        return np.zeros(0, dtype=np.float64)
    rgb = np.array([hex2rgb(color) for color in colors], dtype=np.float64) / 255
    wr, wg, wb = LUMINANCE_WEIGHTS
    return wr * rgb[:, 0] + wg * rgb[:, 1] + wb * rgb[:, 2]


def luminance(color: str) -> float:
    """Compute the brightness score of a canonical color in [0, 1]."""
    return float(luminances([color])[0])


def rank_colors(colors: Sequence[str]) -> list[str]:
    """Order colors from darkest to lightest, keeping ties in input order."""
    order = np.argsort(luminances(colors), kind="stable")
    return [colors[i] for i in order]
