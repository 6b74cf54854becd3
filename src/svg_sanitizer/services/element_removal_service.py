# src/svg_sanitizer/services/element_removal_service.py
import logging
from typing import Iterable

from ..dom.document import SvgDocument

logger = logging.getLogger(__name__)


class ElementRemovalService:
    """Detaches every element matching a list of ids. Unknown ids are a no-op."""

    @staticmethod
    def remove(doc: SvgDocument, ids: Iterable[str]) -> int:
        """
        Removes all elements whose id equals any of the given ids.

        Args:
            doc (SvgDocument): The document to mutate in place.
            ids (Iterable[str]): Target ids; duplicates are tolerated.

        The root element is never detached, even when its id is listed.

        Returns:
            int: Number of elements actually detached.
        """
        removed = 0
        for element_id in ids:
            if not element_id:
                continue
            for element in doc.query_by_id(element_id):
                if element is doc.root:
                    logger.debug("Keeping root element '%s'; the root cannot be removed.", element_id)
                    continue
                # An earlier match may have been an ancestor of this one.
                if doc.remove_from_parent(element):
                    removed += 1
                    logger.debug("Removed <%s id='%s'>.", element.name, element_id)
        return removed
