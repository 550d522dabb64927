"""
Extractor: paragraph-scoring selection of the article root.

Every <p> votes for its immediate parent. A parent's score is adjusted by
its class and id (boilerplate vocabulary -50, content vocabulary +25) and
grows by the byte length of each paragraph longer than 10 bytes. The parent
with the highest nonzero score becomes the article node.

Pipeline position: Stage 3 (Preprocessor → TreeBuilder → Extractor → Sanitizer).
Input:  BeautifulSoup document
Output: the selected Tag (a reference into the document) or None

Scores live in a side table scoped to one extract() call; nothing is written
onto the tree, so extracting twice from the same document gives the same node.

Reference: http://code.google.com/p/arc90labs-readability/
"""

import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

from .logger import get_module_logger

logger = get_module_logger("extractor")

PARAGRAPH_TAG = "p"

# Boilerplate vocabulary: a substring hit anywhere in class or id.
NEGATIVE_PATTERN = re.compile(r"(comment|meta|footer|footnote)", re.IGNORECASE)

_CONTENT_VOCABULARY = r"post|hentry|entry[-]?(content|text|body)?|article[-]?(content|text|body)?"

# Content vocabulary as a whole whitespace-bounded token of the class list.
POSITIVE_CLASS_PATTERN = re.compile(
    r"((^|\s)(" + _CONTENT_VOCABULARY + r")(\s|$))", re.IGNORECASE
)

# Ids are singular, so the content vocabulary must be the entire value.
POSITIVE_ID_PATTERN = re.compile(r"^(" + _CONTENT_VOCABULARY + r")$", re.IGNORECASE)

NEGATIVE_WEIGHT = -50
POSITIVE_WEIGHT = 25

# Paragraphs at or below this many bytes add nothing to their parent.
MIN_PARAGRAPH_LENGTH = 10


def _attr_text(node: Tag, name: str) -> str:
    """Read an attribute as one string; bs4 keeps class as a list of tokens."""
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def text_length(text: str) -> int:
    """Length in UTF-8 bytes, the unit paragraph lengths are scored in."""
    return len(text.encode("utf-8"))


class Extractor:
    """Selects the single node most likely to be the article root."""

    def class_weight(self, class_name: str) -> int:
        """Score adjustment for a parent's class value."""
        if not class_name:
            return 0
        if NEGATIVE_PATTERN.search(class_name):
            return NEGATIVE_WEIGHT
        if POSITIVE_CLASS_PATTERN.search(class_name):
            return POSITIVE_WEIGHT
        return 0

    def id_weight(self, node_id: str) -> int:
        """Score adjustment for a parent's id value."""
        if not node_id:
            return 0
        if NEGATIVE_PATTERN.search(node_id):
            return NEGATIVE_WEIGHT
        if POSITIVE_ID_PATTERN.search(node_id):
            return POSITIVE_WEIGHT
        return 0

    def score(self, soup: BeautifulSoup) -> list[tuple[Tag, int]]:
        """
        Score every parent of a paragraph.

        Returns:
            (parent, score) pairs in the order parents were first seen
        """
        # id(parent) -> [parent, score]; dict order is first-seen order.
        # Keyed by object id because bs4 compares tags structurally.
        scores = {}
        paragraphs = soup.find_all(PARAGRAPH_TAG)

        for paragraph in paragraphs:
            parent = paragraph.parent
            if parent is None:
                continue

            entry = scores.setdefault(id(parent), [parent, 0])

            # Each paragraph re-applies its parent's class/id signal
            entry[1] += self.class_weight(_attr_text(parent, "class"))
            entry[1] += self.id_weight(_attr_text(parent, "id"))

            length = text_length(paragraph.get_text())
            if length > MIN_PARAGRAPH_LENGTH:
                entry[1] += length

        logger.debug(f"Scored {len(paragraphs)} paragraphs across {len(scores)} parents")
        return [(node, value) for node, value in scores.values()]

    def select(self, candidates: list[tuple[Tag, int]]) -> Optional[Tag]:
        """Pick the first candidate with the highest nonzero score."""
        best = None
        best_score = 0

        for node, value in candidates:
            # Strictly greater, so ties keep the earlier candidate
            if value and value > best_score:
                best = node
                best_score = value

        if best is not None:
            logger.info(f"Selected <{best.name}> with score {best_score}")
        else:
            logger.info("No candidate scored above zero")
        return best

    def extract(self, soup: BeautifulSoup) -> Optional[Tag]:
        """
        Find the article node of a document.

        Args:
            soup: Parsed document

        Returns:
            The article root, or None when no paragraph produced a positive score
        """
        return self.select(self.score(soup))


def extract(soup: BeautifulSoup) -> Optional[Tag]:
    """Convenience function to find the article node of a document."""
    return Extractor().extract(soup)
