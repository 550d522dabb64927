"""
ReadableDocument: everything derived from one loaded source.

A ReadableDocument is created by Readability.load() and never modified by a
later load; a new load produces a new document. The article node and the
sanitized content are each computed at most once and cached here.

Not safe for concurrent use without external locking. Separate documents
share no state.
"""

from typing import Optional

from bs4 import BeautifulSoup, Tag

from . import accessors
from .extractor import Extractor
from .sanitizer import Sanitizer
from .schemas import Article
from .exceptions import ContentNotExtractableError
from .logger import get_module_logger

logger = get_module_logger("document")

# Marks "not computed yet", since None is a valid extraction result
_UNSET = object()


class ReadableDocument:
    """The per-load result value: source, tree and cached derived state."""

    def __init__(
        self,
        soup: BeautifulSoup,
        source: str,
        charset: str = "utf-8",
        warnings: Optional[list[str]] = None,
        extractor: Optional[Extractor] = None,
        sanitizer: Optional[Sanitizer] = None
    ):
        self.soup = soup
        self.source = source
        self.charset = charset
        self.warnings = list(warnings or [])
        self.extractor = extractor or Extractor()
        self.sanitizer = sanitizer or Sanitizer()

        self._node = _UNSET
        self._content = _UNSET

    @property
    def article_node(self) -> Optional[Tag]:
        """The selected article root inside soup, or None."""
        if self._node is _UNSET:
            self._node = self.extractor.extract(self.soup)
        return self._node

    def _require_node(self) -> Tag:
        node = self.article_node
        if node is None:
            raise ContentNotExtractableError(
                details={"charset": self.charset, "paragraphs": len(self.soup.find_all("p"))}
            )
        return node

    def title(self) -> Optional[str]:
        return accessors.get_title(self.soup)

    def date(self) -> Optional[str]:
        # Matched against the raw source, which may carry dates outside the body
        return accessors.get_date(self.source)

    def content(self) -> str:
        """
        Sanitized article markup.

        Raises:
            ContentNotExtractableError: no article node was found
        """
        if self._content is _UNSET:
            self._content = self.sanitizer.clean(self._require_node())
        return self._content

    def text(self) -> str:
        return accessors.get_text(self.content())

    def images(self) -> list[str]:
        """Image URLs from the article node (not the sanitized copy)."""
        return accessors.get_images(self._require_node())

    def word_count(self) -> int:
        return accessors.word_count(self.text())

    def to_article(self) -> Article:
        """
        Collect every accessor into one Article.

        Raises:
            ContentNotExtractableError: no article node was found
        """
        text = self.text()
        return Article(
            title=self.title(),
            date=self.date(),
            content=self.content(),
            text=text,
            images=self.images(),
            word_count=accessors.word_count(text),
            charset=self.charset,
            warnings=self.warnings
        )
