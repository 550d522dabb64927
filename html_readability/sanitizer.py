"""
Sanitizer: turns the selected article node into minimal, inert markup.

Pipeline position: Stage 4 (Preprocessor → TreeBuilder → Extractor → Sanitizer).
Input:  article Tag (a reference into the loaded document)
Output: serialized markup of a cleaned deep copy; the document is never touched
"""

import copy
from typing import Optional

from bs4 import BeautifulSoup, Tag

from .logger import get_module_logger

logger = get_module_logger("sanitizer")

# Elements removed together with everything inside them.
JUNK_TAGS = [
    "style", "form", "iframe", "script", "button", "input", "textarea",
    "noscript", "select", "option", "object", "applet", "basefont",
    "bgsound", "blink", "canvas", "command", "menu", "nav", "datalist",
    "embed", "frame", "frameset", "keygen", "label", "marquee", "link"
]

# Attributes stripped from every remaining element.
JUNK_ATTRS = [
    "style", "class", "onclick", "onmouseover", "align", "border", "margin"
]


class Sanitizer:
    """Removes junk elements and junk attributes from a copy of the article."""

    def __init__(
        self,
        junk_tags: Optional[list[str]] = None,
        junk_attrs: Optional[list[str]] = None
    ):
        # An empty list is a valid vocabulary: it removes nothing
        self.junk_tags = list(JUNK_TAGS if junk_tags is None else junk_tags)
        self.junk_attrs = list(JUNK_ATTRS if junk_attrs is None else junk_attrs)

    def _remove_junk_tag(self, root: BeautifulSoup, tag_name: str) -> int:
        """Remove every <tag_name> in root, children included. Returns the count."""
        count = 0
        # Nested junk disappears with its ancestor, so re-query until empty
        found = root.find(tag_name)
        while found is not None:
            found.decompose()
            count += 1
            found = root.find(tag_name)
        return count

    def _remove_junk_attr(self, root: BeautifulSoup, attr: str) -> int:
        """Drop attr from every element in root. Returns the count."""
        count = 0
        for tag in root.find_all(True):
            if attr in tag.attrs:
                del tag.attrs[attr]
                count += 1
        return count

    def clean_tree(self, target: BeautifulSoup) -> BeautifulSoup:
        """Strip junk tags, then junk attributes, from target in place."""
        # Tags before attributes; the two passes are independent
        removed_tags = sum(self._remove_junk_tag(target, name) for name in self.junk_tags)
        removed_attrs = sum(self._remove_junk_attr(target, name) for name in self.junk_attrs)

        logger.debug(f"Removed {removed_tags} junk elements and {removed_attrs} junk attributes")
        return target

    def sanitize(self, node: Tag) -> BeautifulSoup:
        """
        Deep-copy node into a fresh container and clean the copy.

        The container lets the copied root itself be removed when it is a
        junk tag (a <form> selected as the article yields empty content).
        """
        target = BeautifulSoup("", "html.parser")
        target.append(copy.copy(node))
        return self.clean_tree(target)

    def serialize(self, target: BeautifulSoup) -> str:
        return target.decode().strip()

    def clean(self, node: Tag) -> str:
        """Sanitize node and return the cleaned markup."""
        return self.serialize(self.sanitize(node))

    def clean_markup(self, markup: str) -> str:
        """Sanitize an already-serialized fragment, e.g. previous clean() output."""
        return self.serialize(self.clean_tree(BeautifulSoup(markup, "html.parser")))


def sanitize(node: Tag) -> str:
    """Convenience function to sanitize an article node."""
    return Sanitizer().clean(node)
