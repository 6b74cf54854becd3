# src/svg_sanitizer/color/model.py
"""
Color literal parsing and RGB <-> HSL conversion.

Only '#RGB', '#RRGGBB' and 'rgb()'/'rgba()' literals are understood. Anything
else (named colors, hsl(), currentColor, url(#gradient), ...) parses to None so
callers can leave the original value untouched.
"""
import colorsys
import re
from typing import NamedTuple, Optional

HEX_RE = re.compile(r'^#([0-9a-f]{3}|[0-9a-f]{6})$', re.IGNORECASE)
RGB_RE = re.compile(
    r'^rgba?\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*(?:,\s*(?:\d+(?:\.\d*)?|\.\d+)\s*)?\)$',
    re.IGNORECASE
)


class RGB(NamedTuple):
    red: int
    green: int
    blue: int


class HSL(NamedTuple):
    hue: float  # degrees, may lie outside [0, 360) before conversion
    saturation: float  # percent
    lightness: float  # percent


def parse_color(literal: str) -> Optional[RGB]:
    """
    Parses a color literal into an RGB triple.

    Args:
        literal (str): e.g. '#f00', '#FF0000', 'rgb(255, 0, 0)', 'rgba(255,0,0,0.5)'.

    Returns:
        Optional[RGB]: The channels, or None if the syntax is not supported.
    """
    if not literal:
        return None
    value = literal.strip()

    match = HEX_RE.match(value)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    match = RGB_RE.match(value)
    if match:
        # Alpha is accepted but dropped; output colors are always opaque.
        return RGB(*(min(255, int(channel)) for channel in match.groups()[:3]))

    return None


def format_hex(rgb: RGB) -> str:
    """Formats channels as a lower-case 6 digit hex literal."""
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def normalize_color(literal: str) -> Optional[str]:
    """Returns the '#rrggbb' form of a literal, or None if it does not parse."""
    rgb = parse_color(literal)
    return format_hex(rgb) if rgb else None


def rgb_to_hsl(rgb: RGB) -> HSL:
    """Converts channels to HSL with hue in [0, 360) and whole-number components."""
    h, l, s = colorsys.rgb_to_hls(rgb.red / 255, rgb.green / 255, rgb.blue / 255)
    return HSL(round(h * 360) % 360, round(s * 100), round(l * 100))


def hsl_to_rgb(hsl: HSL) -> RGB:
    """Converts HSL back to channels. Hue is reduced modulo 360 first."""
    h = (hsl.hue % 360) / 360
    s = min(100.0, max(0.0, hsl.saturation)) / 100
    l = min(100.0, max(0.0, hsl.lightness)) / 100
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return RGB(round(r * 255), round(g * 255), round(b * 255))
