# src/svg_sanitizer/dom/document.py
import logging
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup, Tag

from ..exceptions import ParseFailed

logger = logging.getLogger(__name__)


def local_name(tag: Tag) -> str:
    """Returns the tag name without its namespace prefix (e.g. 'svg:g' -> 'g')."""
    return (tag.name or "").split(":")[-1]


class SvgDocument:
    """
    Mutable, queryable wrapper around a parsed vector-graphics document.

    The tree is held by BeautifulSoup using the lxml XML builder, which runs in
    recovery mode: malformed markup is repaired as far as possible instead of
    rejected. Only input that yields no element at all raises ParseFailed.
    """

    def __init__(self, soup: BeautifulSoup, root: Tag):
        self.soup = soup
        self.root = root

    @classmethod
    def parse(cls, text: str) -> "SvgDocument":
        """
        Parses raw markup into an SvgDocument.

        Args:
            text (str): The raw document text.

        Returns:
            SvgDocument: The parsed document.

        Raises:
            ParseFailed: If the text is empty or contains no element.
        """
        if not text or not text.strip():
            raise ParseFailed("Failed to parse SVG content: document is empty")

        # Strip a leading BOM; the XML builder chokes on it after decoding.
        clean_text = text.replace('\ufeff', '').strip()
        try:
            soup = BeautifulSoup(clean_text, "xml")
        except Exception as e:
            raise ParseFailed(f"Failed to parse SVG content: {e}") from e

        root = soup.find(True)
        if root is None:
            raise ParseFailed("Failed to parse SVG content: no root element found")

        logger.debug("Parsed document with root <%s>.", root.name)
        return cls(soup, root)

    def serialize(self) -> str:
        """Serializes the current tree back to markup."""
        return self.soup.decode()

    # -------- Queries --------

    def query_by_id(self, element_id: str) -> List[Tag]:
        """Returns every attached element whose id equals element_id, in document order."""
        return self.soup.find_all(attrs={"id": element_id})

    def elements_with_attribute(self, name: str) -> List[Tag]:
        """Returns every element carrying the given attribute, in document order."""
        return self.soup.find_all(attrs={name: True})

    def identified_elements(self) -> List[Tag]:
        """Returns every element with a non-empty id attribute."""
        return [el for el in self.elements_with_attribute("id") if el.get("id")]

    def elements_named(self, name: str) -> List[Tag]:
        """Returns every element whose local tag name equals name."""
        return self.soup.find_all(lambda tag: local_name(tag) == name)

    # -------- Element access --------

    @staticmethod
    def attribute(element: Tag, name: str) -> Optional[str]:
        value = element.get(name)
        if value is None:
            return None
        # Multi-valued attributes only appear with HTML builders; join them back.
        if isinstance(value, list):
            return " ".join(value)
        return value

    @staticmethod
    def set_attribute(element: Tag, name: str, value: str) -> None:
        element[name] = value

    @staticmethod
    def child_elements_named(element: Tag, tag_names: Iterable[str]) -> int:
        """Counts the direct child elements whose local name is in tag_names."""
        names = set(tag_names)
        return sum(
            1 for child in element.children
            if isinstance(child, Tag) and local_name(child) in names
        )

    @staticmethod
    def text_of(element: Tag) -> str:
        return element.get_text()

    @staticmethod
    def set_text(element: Tag, text: str) -> None:
        element.string = text

    # -------- Mutation --------

    def is_attached(self, element: Tag) -> bool:
        """True if the element is still reachable from the document root."""
        node = element
        while node is not None:
            if node is self.soup:
                return True
            node = node.parent
        return False

    def remove_from_parent(self, element: Tag) -> bool:
        """
        Detaches an element (and its whole subtree) from the tree.

        Returns:
            bool: False if the element is the root or was already detached.
        """
        if element is self.root or not self.is_attached(element):
            return False
        element.extract()
        return True
