# src/svg_sanitizer/services/color_rewrite_service.py
from __future__ import annotations

import logging
from typing import Iterator, List

from ..color.css import (
    CSS_COLOR_PROPERTIES,
    STYLE_COLOR_PROPERTIES,
    iter_declaration_values,
    iter_stylesheet_values,
    rewrite_declarations,
    rewrite_stylesheet,
)
from ..color.model import normalize_color
from ..color.transformer import ColorTransformer
from ..dom.document import SvgDocument

logger = logging.getLogger(__name__)

PAINT_ATTRIBUTES = ("fill", "stroke")


def _is_paint(value: str) -> bool:
    return bool(value) and value.strip().lower() != "none"


class ColorRewriteService:
    """
    Applies a ColorTransformer to every color-bearing surface of a document:
    fill/stroke attributes, inline style attributes and <style> blocks.
    """

    def __init__(self, transformer: ColorTransformer):
        self.transformer = transformer

    def rewrite(self, doc: SvgDocument) -> int:
        """Recolors the document in place and returns the number of changed values."""
        changed = 0

        for attr in PAINT_ATTRIBUTES:
            for element in doc.elements_with_attribute(attr):
                value = doc.attribute(element, attr)
                if not _is_paint(value):
                    continue
                new_value = self.transformer.transform(value)
                if new_value != value:
                    doc.set_attribute(element, attr, new_value)
                    changed += 1

        for element in doc.elements_with_attribute("style"):
            style = doc.attribute(element, "style") or ""
            new_style = rewrite_declarations(style, STYLE_COLOR_PROPERTIES, self.transformer.map_value)
            if new_style != style:
                doc.set_attribute(element, "style", new_style)
                changed += 1

        for style_tag in doc.elements_named("style"):
            css = doc.text_of(style_tag)
            new_css = rewrite_stylesheet(css, CSS_COLOR_PROPERTIES, self.transformer.map_value)
            if new_css != css:
                doc.set_text(style_tag, new_css)
                changed += 1

        logger.debug("Rewrote %d color surfaces (%d distinct colors).", changed, len(self.transformer.cache))
        return changed


def _iter_document_colors(doc: SvgDocument) -> Iterator[str]:
    for attr in PAINT_ATTRIBUTES:
        for element in doc.elements_with_attribute(attr):
            value = doc.attribute(element, attr)
            if _is_paint(value):
                yield value

    for element in doc.elements_with_attribute("style"):
        yield from iter_declaration_values(doc.attribute(element, "style") or "", CSS_COLOR_PROPERTIES)

    for style_tag in doc.elements_named("style"):
        yield from iter_stylesheet_values(doc.text_of(style_tag), CSS_COLOR_PROPERTIES)


def collect_colors(doc: SvgDocument) -> List[str]:
    """Returns the distinct '#rrggbb' colors used in a document, in first-seen order."""
    seen = {}
    for value in _iter_document_colors(doc):
        if not _is_paint(value):
            continue
        normalized = normalize_color(value)
        if normalized:
            seen[normalized] = True
    return list(seen)
