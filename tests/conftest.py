import logging
import os

import pytest

from svgrecolor import Palette

logger = logging.getLogger(__name__)

# Palettes used across tests. Slot order matches brightness order for the
# first two; SHUFFLED deliberately does not.
OCEAN_BLUE = {
    "primary": "#003366",
    "secondary": "#0066CC",
    "accent": "#3399FF",
    "neutral": "#E6F2FF",
}

MONOCHROME = {
    "primary": "#000000",
    "secondary": "#666666",
    "accent": "#999999",
    "neutral": "#FFFFFF",
}

SHUFFLED = {
    "primary": "#FFFFFF",
    "secondary": "#000000",
    "accent": "#999999",
    "neutral": "#666666",
}

SIMPLE_SVG = (
    '<svg width="200" height="200" viewBox="0 0 200 200">'
    '<rect x="50" y="50" width="100" height="100" fill="#FF0000"/>'
    "</svg>"
)

GRADIENT_SVG = """<?xml version="1.0"?><svg xmlns="http://www.w3.org/2000/svg">
    <defs>
        <linearGradient id="grad1">
            <stop offset="0%" style="stop-color:#FF0000"/>
            <stop offset="100%" style="stop-color:#0000FF"/>
        </linearGradient>
    </defs>
    <rect fill="url(#grad1)" width="100" height="100"/>
</svg>"""


def get_fixture(name: str) -> str:
    """Get a fixture by name."""
    return os.path.join(os.path.dirname(__file__), "fixtures", name)


@pytest.fixture
def logo_svg() -> str:
    """Multi-color logo with a gradient, style declarations and xlink."""
    with open(get_fixture("logo.svg"), encoding="utf-8") as f:
        return f.read()


@pytest.fixture
def ocean_blue() -> dict[str, str]:
    return dict(OCEAN_BLUE)


@pytest.fixture
def monochrome() -> dict[str, str]:
    return dict(MONOCHROME)


@pytest.fixture
def shuffled_palette() -> Palette:
    return Palette.from_dict(SHUFFLED)
