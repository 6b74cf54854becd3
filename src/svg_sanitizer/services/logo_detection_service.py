# src/svg_sanitizer/services/logo_detection_service.py
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from bs4 import Tag

from ..dom.document import SvgDocument, local_name
from ..model import SanitizerSettings

logger = logging.getLogger(__name__)

GROUP_TAG = "g"
SHAPE_TAGS = ("path", "polygon")
MATCH_ATTRIBUTES = ("id", "class", "data-name")


class LogoDetectionService:
    """
    Finds sub-trees that look like logos, watermarks or branding.

    Two strategies run per element carrying an id, after a preserve check:
      1. keyword match on id / class / data-name
      2. a group with many direct path/polygon children
    """

    def __init__(self, settings: Optional[SanitizerSettings] = None, custom_keywords: Iterable[str] = ()):
        self.settings = settings or SanitizerSettings()
        keywords: List[str] = list(self.settings.logo_keywords)
        for keyword in custom_keywords:
            keyword = keyword.strip().lower()
            if keyword and keyword not in keywords:
                keywords.append(keyword)
        self.keywords = keywords
        self.preserve_keywords = list(self.settings.preserve_keywords)

    @staticmethod
    def _haystacks(doc: SvgDocument, element: Tag) -> List[str]:
        return [(doc.attribute(element, name) or "").lower() for name in MATCH_ATTRIBUTES]

    def should_preserve(self, haystacks: List[str]) -> bool:
        """True if any preserve keyword occurs in id, class or data-name."""
        return any(kw in hay for kw in self.preserve_keywords for hay in haystacks)

    def match_keyword(self, haystacks: List[str]) -> Optional[str]:
        """Returns the first logo keyword found in id, class or data-name."""
        for keyword in self.keywords:
            if any(keyword in hay for hay in haystacks):
                return keyword
        return None

    def detect(self, doc: SvgDocument) -> Dict[str, str]:
        """
        Scans the document and returns an id -> reason mapping in document order.
        """
        detected: Dict[str, str] = {}

        for element in doc.identified_elements():
            element_id = doc.attribute(element, "id")
            haystacks = self._haystacks(doc, element)

            if self.should_preserve(haystacks):
                logger.debug("Preserving '%s'.", element_id)
                continue

            keyword = self.match_keyword(haystacks)
            if keyword is not None:
                detected[element_id] = f"Contains keyword '{keyword}' in ID/class/data-name"
                logger.debug("Detected '%s' by keyword '%s'.", element_id, keyword)
                continue

            # Only direct children are counted, not all descendants.
            if element_id not in detected and local_name(element) == GROUP_TAG:
                shape_count = doc.child_elements_named(element, SHAPE_TAGS)
                if shape_count >= self.settings.decorative_threshold:
                    detected[element_id] = (
                        f"Group contains {shape_count} paths/polygons (likely decorative logo)"
                    )
                    logger.debug("Detected '%s' by structure (%d shapes).", element_id, shape_count)

        return detected
