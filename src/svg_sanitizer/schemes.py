# src/svg_sanitizer/schemes.py
from typing import Dict, List

from .exceptions import InvalidScheme
from .model import ColorSchemeInfo

# Target hue (degrees) per scheme name.
COLOR_SCHEMES: Dict[str, int] = {
    "green": 120,
    "blue": 210,
    "red": 0,
    "purple": 280,
    "orange": 30,
    "teal": 180,
}

CATALOG_VERSION = 1

SCHEME_CATALOG: List[ColorSchemeInfo] = [
    ColorSchemeInfo(name="green", label="Green", color="#10b981", description="Fresh green tones"),
    ColorSchemeInfo(name="blue", label="Blue", color="#3b82f6", description="Cool blue shades"),
    ColorSchemeInfo(name="red", label="Red", color="#ef4444", description="Bold red hues"),
    ColorSchemeInfo(name="purple", label="Purple", color="#a855f7", description="Rich purple tones"),
    ColorSchemeInfo(name="orange", label="Orange", color="#f97316", description="Vibrant orange shades"),
    ColorSchemeInfo(name="teal", label="Teal", color="#14b8a6", description="Modern teal colors"),
]


def resolve_hue(scheme: str) -> int:
    """Returns the target hue for a scheme name or raises InvalidScheme."""
    try:
        return COLOR_SCHEMES[scheme]
    except KeyError:
        raise InvalidScheme(scheme, COLOR_SCHEMES.keys()) from None
