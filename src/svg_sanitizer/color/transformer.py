# src/svg_sanitizer/color/transformer.py
import logging
import random
from typing import Dict, Optional, Protocol

from .model import HSL, format_hex, hsl_to_rgb, parse_color, rgb_to_hsl

logger = logging.getLogger(__name__)

HUE_JITTER = 10
SATURATION_JITTER = 5
LIGHTNESS_JITTER = 3


class JitterSource(Protocol):
    """Anything with random.Random's inclusive randint()."""

    def randint(self, a: int, b: int) -> int:
        ...


class ZeroJitter:
    """Jitter source that never offsets; yields exact, reproducible colors."""

    def randint(self, a: int, b: int) -> int:
        return 0


class ColorTransformer:
    """
    Moves colors into a target hue family while keeping their saturation and
    lightness, with a small random jitter so the result does not look flat.

    Results are memoized by normalized source literal, so every occurrence of
    one color in a document maps to the same output. One transformer serves
    exactly one sanitize call and one target hue.
    """

    def __init__(self, target_hue: int, rng: Optional[JitterSource] = None):
        self.target_hue = target_hue
        self.rng = rng if rng is not None else random.Random()
        self.cache: Dict[str, str] = {}

    def _clamp(self, value: float) -> float:
        return max(0, min(100, value))

    def transform(self, color: str) -> str:
        """
        Transforms one color literal.

        Args:
            color (str): The source literal as found in the document.

        Returns:
            str: A '#rrggbb' literal, or the untouched input if it cannot be parsed.
        """
        key = color.strip().lower()
        if key in self.cache:
            return self.cache[key]

        rgb = parse_color(key)
        if rgb is None:
            return color

        hsl = rgb_to_hsl(rgb)
        shifted = HSL(
            hue=self.target_hue + self.rng.randint(-HUE_JITTER, HUE_JITTER),
            saturation=self._clamp(hsl.saturation + self.rng.randint(-SATURATION_JITTER, SATURATION_JITTER)),
            lightness=self._clamp(hsl.lightness + self.rng.randint(-LIGHTNESS_JITTER, LIGHTNESS_JITTER)),
        )
        result = format_hex(hsl_to_rgb(shifted))

        self.cache[key] = result
        logger.debug("Color %s -> %s", key, result)
        return result

    def map_value(self, color: str) -> Optional[str]:
        """Mapper for the CSS rewriters: None means 'leave as-is'."""
        result = self.transform(color)
        return None if result == color else result
